from enum import Enum


class AnswerOption(str, Enum):
    a = "A"
    b = "B"
    c = "C"
    d = "D"
