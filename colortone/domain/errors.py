class ColorToneError(Exception):
    code = "E_COLORTONE"

    def __init__(self, message: str = "") -> None:
        super().__init__(message)


class InvalidImageSize(ColorToneError):
    code = "E_INVALID_IMAGE_SIZE"


class ImageProcessingFailed(ColorToneError):
    code = "E_IMAGE_PROCESSING"
