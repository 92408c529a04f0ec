class ColorParseError(ValueError):
    """Base class for text that does not describe a color."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"{reason}: {text!r}")


class MalformedHexError(ColorParseError):
    pass


class MalformedFunctionError(ColorParseError):
    pass


class ChannelRangeError(ColorParseError):
    """A numeric channel parsed fine but lies outside its allowed range."""

    def __init__(self, text: str, channel: str, value: float, low: float, high: float) -> None:
        self.channel = channel
        self.value = value
        super().__init__(text, f"channel {channel} = {value} outside [{low}, {high}]")


class UnknownColorNameError(ColorParseError):
    pass
