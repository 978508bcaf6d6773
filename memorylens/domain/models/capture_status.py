from enum import Enum


class CaptureStatus(str, Enum):
    """On/off flag the capture device polls in the realtime database."""
    STOPPED = "0"
    CAPTURING = "1"

    @classmethod
    def from_value(cls, value: object) -> "CaptureStatus":
        """Coerce a raw database value; anything but "1" counts as stopped."""
        if value is None:
            return cls.STOPPED
        return cls.CAPTURING if str(value).strip() == cls.CAPTURING.value else cls.STOPPED

    def toggled(self) -> "CaptureStatus":
        return CaptureStatus.STOPPED if self is CaptureStatus.CAPTURING else CaptureStatus.CAPTURING
