"""Errors raised while drafting content."""


class ContentGenerationException(Exception):
    """Base exception for draft generation"""
    pass


class RateLimitExceeded(ContentGenerationException):
    """Raised when the hourly generation quota is used up"""
    pass


class GenerationError(ContentGenerationException):
    """Raised when the completion service returns a non-success response"""
    pass


class ParseError(ContentGenerationException):
    """Raised when the completion service returns something that is not the expected JSON"""
    pass
