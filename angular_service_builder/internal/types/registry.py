from typing import Dict, Iterator, List, Optional, Tuple


class InterfaceRegistry:
    """
    Реестр сгенерированных TypeScript интерфейсов на один проход генерации.

    Хранит текст интерфейса по имени и, для интерфейсов, построенных
    генератором, список имен типов, на которые ссылаются его поля.
    Повторная регистрация имени перезаписывает и текст, и ссылки.
    """

    def __init__(self):
        self._interfaces: Dict[str, str] = {}
        self._references: Dict[str, Optional[Tuple[str, ...]]] = {}

    def register(
        self, name: str, text: str, references: Optional[List[str]] = None
    ) -> bool:
        """
        Регистрация интерфейса.

        Args:
            name: Имя интерфейса
            text: Полный текст интерфейса
            references: Имена типов из полей; None, если ссылки неизвестны
                (тогда сборщик DTO ищет их по тексту)

        Returns:
            True, если под этим именем уже был другой текст
        """
        previous = self._interfaces.get(name)
        self._interfaces[name] = text
        self._references[name] = tuple(references) if references is not None else None

        return previous is not None and previous != text

    def get(self, name: str) -> Optional[str]:
        return self._interfaces.get(name)

    def references(self, name: str) -> Optional[Tuple[str, ...]]:
        return self._references.get(name)

    def names(self) -> List[str]:
        return list(self._interfaces)

    def items(self) -> List[Tuple[str, str]]:
        return list(self._interfaces.items())

    def clear(self):
        self._interfaces.clear()
        self._references.clear()

    def __contains__(self, name: str) -> bool:
        return name in self._interfaces

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._interfaces))

    def __len__(self) -> int:
        return len(self._interfaces)

    def __repr__(self) -> str:
        return f"InterfaceRegistry({self.names()!r})"
