from fruit_record import FruitRecord


class DefaultCatalogueInitializer:
    def create(self) -> list[FruitRecord]:
        return [
            FruitRecord("Apple", 8.0, 7.5, 8.0),
            FruitRecord("Banana", 20.0, 3.5, 3.5),
            FruitRecord("Cherry", 2.0, 2.0, 2.0),
            FruitRecord("Lemon", 7.0, 5.0, 5.0),
            FruitRecord("Watermelon", 30.0, 25.0, 25.0),
        ]
