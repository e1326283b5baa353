class ConfigurationError(Exception):
    pass


class MissingConfigurationError(ConfigurationError):

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Missing environment variable: \"{name}\"")


class VendorResponseError(Exception):
    """Raised when the inventory endpoint returns an unexpected payload."""

    def __init__(self, message: str, part_number: str, location: str):
        self.part_number = part_number
        self.location = location
        super().__init__(f"{message} (part {part_number}, location "
                         f"{location})")
