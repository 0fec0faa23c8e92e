""" Unsupported element type error """


class UnsupportedElementTypeError(TypeError):
    """
    Raised when a delimited parser is built for an element type
    that has no string conversion
    """

    def __init__(self, element_type: object) -> None:
        super().__init__(
            f"No string conversion available for element type {element_type!r}"
        )
        self.element_type = element_type
