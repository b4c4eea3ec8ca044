"""UI-события с остановкой всплытия.

Классы:
    UIEvent
        Событие интерфейса, которое всплывает от кнопки к карточке и фону.
"""

from dataclasses import dataclass, field


@dataclass
class UIEvent:
    """Событие интерфейса.

    Обработчики вызываются от самого вложенного элемента к родителям;
    после stop_propagation() родительские обработчики пропускаются.

    Attributes:
        name: Имя события ("click", "keydown").
        target: Идентификатор элемента, на котором оно возникло.
    """

    name: str = "click"
    target: str = ""
    _propagation_stopped: bool = field(default=False, init=False, repr=False)

    def stop_propagation(self) -> None:
        self._propagation_stopped = True

    @property
    def propagation_stopped(self) -> bool:
        return self._propagation_stopped
