from enum import Enum


class ListableEnum(Enum):
    @classmethod
    def as_list(cls) -> list:
        return [member.value for member in cls]

    @classmethod
    def as_choices(cls) -> list[tuple]:
        return [(member.value, member.value) for member in cls]
