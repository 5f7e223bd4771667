"""服务层包"""

from .builder import (
    TrainBuilder,
    ElectricTrainBuilder,
    DieselTrainBuilder,
    CargoTrainBuilder,
    builder_for,
)
from .factory import EntityFactory, DefaultEntityFactory
from .iterator import TrainIterator
from .commands import (
    TicketCommand,
    BookTicketCommand,
    CancelTicketCommand,
    ModifyTicketCommand,
    TicketManager,
)
from .observers import TrainObserver, LoggingObserver, DisplayBoardObserver
from .memento_manager import MementoManager
from .visitor import TrainVisitor, InspectionVisitor
from .state import TrainState, TrainContext, transition
from .capabilities import CAPABILITIES, TrainCapabilities, TrainController
from .templates import (
    OperationTemplate,
    ServiceTemplate,
    operation_template_for,
    service_template_for,
)
from .schedule import Schedule
from .train_manager import TrainManager, get_train_manager

__all__ = [
    "TrainBuilder",
    "ElectricTrainBuilder",
    "DieselTrainBuilder",
    "CargoTrainBuilder",
    "builder_for",
    "EntityFactory",
    "DefaultEntityFactory",
    "TrainIterator",
    "TicketCommand",
    "BookTicketCommand",
    "CancelTicketCommand",
    "ModifyTicketCommand",
    "TicketManager",
    "TrainObserver",
    "LoggingObserver",
    "DisplayBoardObserver",
    "MementoManager",
    "TrainVisitor",
    "InspectionVisitor",
    "TrainState",
    "TrainContext",
    "transition",
    "CAPABILITIES",
    "TrainCapabilities",
    "TrainController",
    "OperationTemplate",
    "ServiceTemplate",
    "operation_template_for",
    "service_template_for",
    "Schedule",
    "TrainManager",
    "get_train_manager",
]
