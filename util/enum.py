import enum


class DbState(str, enum.Enum):
    """Connection state reported by the health check."""

    connected = "Connected"
    disconnected = "Disconnected"


class HealthState(str, enum.Enum):
    ok = "OK"
