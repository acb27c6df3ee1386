"""
Exceptions raised by the generators.
"""


class InvalidParameterError(ValueError):
    """A generator parameter falls outside its documented range."""

    def __init__(self, name, value, reason):
        super().__init__(f"invalid {name} {value}: {reason}")
        self.name = name
        self.value = value
