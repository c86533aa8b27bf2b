from cssbuilder.model.rectangle import Rectangle

__all__ = ["Rectangle"]
