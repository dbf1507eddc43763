from dataclasses import dataclass


@dataclass(frozen=True)
class FruitRecord:
    name: str
    length: float
    width: float
    height: float

    @property
    def volume(self) -> float:
        return self.length * self.width * self.height

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "length": self.length,
            "width": self.width,
            "height": self.height,
        }
