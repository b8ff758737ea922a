"""Errors raised by the slackhook models."""


class InvalidArgumentError(TypeError):
    """A value of the wrong kind was passed to a model setter."""
