__all__ = ['NoLoad', 'ColorLoad']


class NoLoad:
    """
    Empty payload for vertices or edges which do not carry any data.
    """
    __slots__ = ()

    def __eq__(self, other) -> bool:
        return isinstance(other, NoLoad)

    def __repr__(self):
        return 'NoLoad()'


class ColorLoad:
    """
    Payload storing a single integer color.

    Algorithms use the color as partition label, matching mark or cover flag.
    """
    __slots__ = ('color',)

    def __init__(self, color: int = 0):
        self.color = color

    def __eq__(self, other) -> bool:
        if isinstance(other, ColorLoad):
            return self.color == other.color
        return False

    def __repr__(self):
        return f'ColorLoad({self.color})'
