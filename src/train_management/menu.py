import logging
from typing import Callable, Dict, List, Optional

from pydantic import ValidationError

from .models.base import PowerType
from .models.ticket import Ticket
from .models.train import Train
from .services.builder import builder_for
from .services.commands import (
    BookTicketCommand,
    CancelTicketCommand,
    ModifyTicketCommand,
    TicketManager,
)
from .services.factory import DefaultEntityFactory, EntityFactory
from .services.observers import LoggingObserver
from .services.state import TrainState
from .services.templates import operation_template_for, service_template_for
from .services.train_manager import TrainManager, get_train_manager
from .services.visitor import InspectionVisitor, TrainVisitor
from .utils.config import get_settings

logger = logging.getLogger(__name__)

APP_NAME = "train-management"
APP_VERSION = "1.0.0"

# 菜单项定义，编号即输入的选项
MENU_ACTIONS = [
    {"key": "1", "name": "add-train", "description": "Add train"},
    {"key": "2", "name": "display-trains", "description": "Display all trains"},
    {"key": "3", "name": "book-ticket", "description": "Book ticket"},
    {"key": "4", "name": "cancel-ticket", "description": "Cancel ticket"},
    {"key": "5", "name": "modify-ticket", "description": "Modify ticket"},
    {"key": "6", "name": "add-station", "description": "Add station"},
    {"key": "7", "name": "display-stations", "description": "Display all stations"},
    {"key": "8", "name": "update-train-status", "description": "Update train status"},
    {"key": "9", "name": "start-operations", "description": "Start train operations"},
    {"key": "10", "name": "display-train", "description": "Display train by ID"},
    {"key": "11", "name": "inspect", "description": "Inspect train/passenger/station"},
    {"key": "12", "name": "change-state", "description": "Change train state"},
    {"key": "13", "name": "clone-train", "description": "Clone train"},
    {"key": "14", "name": "restore-train", "description": "Restore train state"},
    {"key": "0", "name": "exit", "description": "Exit"},
]


class TrainMenu:
    """控制台菜单：读取一行选择，调用对应处理函数并输出结果行"""

    def __init__(self, manager: TrainManager,
                 factory: Optional[EntityFactory] = None,
                 visitor: Optional[TrainVisitor] = None,
                 input_func: Callable[[str], str] = input,
                 output_func: Callable[[str], None] = print):
        self.manager = manager
        self.factory = factory or DefaultEntityFactory()
        self.visitor = visitor or InspectionVisitor()
        self.ticket_manager = TicketManager()
        self.settings = get_settings()
        self._input = input_func
        self._output = output_func
        self._observer = LoggingObserver()
        self._handlers: Dict[str, Callable[[], List[str]]] = {
            "add-train": self.add_train,
            "display-trains": self.display_trains,
            "book-ticket": self.book_ticket,
            "cancel-ticket": self.cancel_ticket,
            "modify-ticket": self.modify_ticket,
            "add-station": self.add_station,
            "display-stations": self.display_stations,
            "update-train-status": self.update_train_status,
            "start-operations": self.start_operations,
            "display-train": self.display_train,
            "inspect": self.inspect,
            "change-state": self.change_state,
            "clone-train": self.clone_train,
            "restore-train": self.restore_train,
        }

    def ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def show(self, lines: List[str]) -> None:
        for line in lines:
            self._output(line)

    def render_menu(self) -> List[str]:
        return [f"{action['key']}. {action['description']}" for action in MENU_ACTIONS]

    def run(self) -> None:
        logger.info(f"🚀 启动 {APP_NAME} {APP_VERSION}")
        while True:
            self.show(self.render_menu())
            try:
                choice = int(self.ask("Enter your choice: "))
            except ValueError:
                self.show(["Invalid choice. Please enter a number."])
                continue
            except EOFError:
                break
            if choice == 0:
                self.show(["Exiting..."])
                break
            if not self.dispatch(str(choice)):
                break

    def dispatch(self, key: str) -> bool:
        """执行一个菜单项；输入流结束时返回 False"""
        action = next((a for a in MENU_ACTIONS if a["key"] == key), None)
        if action is None or action["name"] not in self._handlers:
            self.show(["Invalid choice. Please try again."])
            return True
        try:
            self.show(self._handlers[action["name"]]())
        except ValidationError as e:
            logger.error(f"❌ 输入数据无效: {e}")
            self.show([f"Invalid input: {e.error_count()} field(s) rejected."])
        except EOFError:
            return False
        return True

    def _find_train(self) -> Optional[Train]:
        return self.manager.schedule.find_train(self.ask("Enter train ID: "))

    # ========== 菜单处理函数 ==========

    def add_train(self) -> List[str]:
        train_id = self.ask("Enter train ID: ")
        raw_type = self.ask("Enter train type (electric/diesel/cargo): ").lower()
        try:
            power_type = PowerType(raw_type) if raw_type else None
        except ValueError:
            return [f"Unknown train type: {raw_type}"]
        builder = builder_for(power_type).train_id(train_id)
        builder.departure_time(self.ask("Enter departure time: "))
        builder.arrival_time(self.ask("Enter arrival time: "))
        builder.status(self.ask("Enter status: ") or self.settings.default_train_status)
        if power_type == PowerType.CARGO:
            weight = self.ask("Enter cargo weight: ")
            try:
                builder.cargo_weight(float(weight) if weight else 0.0)
            except ValueError:
                return [f"Invalid cargo weight: {weight}"]
        train = builder.build()
        train.add_observer(self._observer)
        self.manager.schedule.add_train(train)
        return [f"Train {train.train_id} added."]

    def display_trains(self) -> List[str]:
        iterator = self.manager.schedule.iterator()
        if not iterator.has_next():
            return ["No trains available."]
        lines = []
        while iterator.has_next():
            train = iterator.next()
            lines.append(train.display_info())
            cargo = train.display_cargo_info(self.settings.cargo_weight_unit)
            if cargo:
                lines.append(f"  {cargo}")
        return lines

    def _ticket_command(self, command_cls) -> List[str]:
        ticket = self.manager.get_ticket(self.ask("Enter ticket ID: "))
        if ticket is None:
            return ["Ticket not found."]
        self.ticket_manager.set_command(command_cls(ticket))
        return [self.ticket_manager.execute_command()]

    def book_ticket(self) -> List[str]:
        ticket_id = self.ask("Enter ticket ID: ")
        ticket = self.manager.tickets.get(ticket_id)
        if ticket is None:
            ticket = self.manager.register_ticket(Ticket(
                ticket_id=ticket_id,
                passenger_name=self.ask("Enter passenger name: "),
                seat_number=self.ask("Enter seat number: "),
            ))
        self.ticket_manager.set_command(BookTicketCommand(ticket))
        return [self.ticket_manager.execute_command()]

    def cancel_ticket(self) -> List[str]:
        return self._ticket_command(CancelTicketCommand)

    def modify_ticket(self) -> List[str]:
        ticket = self.manager.get_ticket(self.ask("Enter ticket ID: "))
        if ticket is None:
            return ["Ticket not found."]
        new_seat = self.ask("Enter new seat number: ")
        self.ticket_manager.set_command(ModifyTicketCommand(ticket, new_seat))
        return [self.ticket_manager.execute_command()]

    def add_station(self) -> List[str]:
        station = self.factory.create_station(
            self.ask("Enter station name: "),
            self.ask("Enter station location: "),
        )
        self.manager.schedule.add_station(station)
        return [f"Station {station.name} added."]

    def display_stations(self) -> List[str]:
        stations = self.manager.schedule.stations
        if not stations:
            return ["No stations available."]
        return [station.display_info() for station in stations]

    def update_train_status(self) -> List[str]:
        train = self._find_train()
        if train is None:
            return ["Train not found."]
        self.manager.mementos.save_memento(train)
        train.set_status(self.ask("Enter new status: "))
        return [f"Train {train.train_id} status updated to {train.status}."]

    def start_operations(self) -> List[str]:
        train = self._find_train()
        if train is None:
            return ["Train not found."]
        operation = operation_template_for(train.power_type)
        if operation is None:
            return [f"Train {train.train_id} has no operation sequence."]
        lines = operation.manage_operation(train)
        service = service_template_for(train.power_type)
        if service is not None:
            lines.extend(service.perform_service(train))
        return lines

    def display_train(self) -> List[str]:
        train = self._find_train()
        if train is None:
            return ["Train not found."]
        return [self.manager.manage_train(train), self.manager.context_for(train.train_id).describe()]

    def inspect(self) -> List[str]:
        kind = self.ask("Inspect (train/passenger/station): ").lower()
        if kind == "train":
            train = self._find_train()
            if train is None:
                return ["Train not found."]
            return [train.accept(self.visitor)]
        if kind == "passenger":
            passenger = self.factory.create_passenger(
                self.ask("Enter passenger name: "),
                self.ask("Enter ticket number: "),
                self.ask("Enter seat number: "),
            )
            return [passenger.accept(self.visitor)]
        if kind == "station":
            name = self.ask("Enter station name: ")
            station = next((s for s in self.manager.schedule.stations if s.name == name), None)
            if station is None:
                return ["Station not found."]
            return [station.accept(self.visitor)]
        return [f"Unknown entity: {kind}"]

    def change_state(self) -> List[str]:
        train = self._find_train()
        if train is None:
            return ["Train not found."]
        raw_state = self.ask("Enter state (running/stopped/maintenance): ").lower()
        try:
            requested = TrainState(raw_state)
        except ValueError:
            return [f"Unknown state: {raw_state}"]
        return self.manager.change_state(train, requested)

    def clone_train(self) -> List[str]:
        train = self._find_train()
        if train is None:
            return ["Train not found."]
        new_id = self.ask("Enter ID for the clone (blank keeps the same ID): ")
        clone = train.clone(new_id or None)
        clone.add_observer(self._observer)
        self.manager.schedule.add_train(clone)
        return [f"Train {train.train_id} cloned as {clone.train_id}."]

    def restore_train(self) -> List[str]:
        train = self._find_train()
        if train is None:
            return ["Train not found."]
        raw_index = self.ask("Enter snapshot index (blank for latest): ")
        try:
            index = int(raw_index) if raw_index else None
        except ValueError:
            return [f"Invalid index: {raw_index}"]
        if not self.manager.mementos.restore(train, index):
            return ["Memento not found."]
        return [f"Train {train.train_id} restored.", train.display_info()]


def main():
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    TrainMenu(get_train_manager()).run()


if __name__ == "__main__":
    main()
