from .response_wrappers import SuccessResponse

__all__ = ["SuccessResponse"]
