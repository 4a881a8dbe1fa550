class SpigotError(Exception):
    pass


class DigitCountError(SpigotError, ValueError):
    pass


class DigitLimitError(DigitCountError):
    def __init__(self, maximum: int):
        super().__init__(f"maximum digit count is {maximum}")
        self.maximum = maximum


class AllocationError(SpigotError, MemoryError):
    def __init__(self, size: int, item_bytes: int):
        super().__init__(f"failed to allocate {size * item_bytes} bytes")
        self.size = size


class CarryError(SpigotError, RuntimeError):
    pass
