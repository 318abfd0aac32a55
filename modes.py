from enum import Enum


class Mode(Enum):
    NORMAL = "Normal"
    INSERT = "Insert"
    COMMAND = "Command"
    SEARCH = "Search"
    VIEW = "View"

    def __str__(self):
        return self.value
