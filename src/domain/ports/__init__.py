from .text_generator import TextGenerator

__all__ = [
    "TextGenerator",
]
