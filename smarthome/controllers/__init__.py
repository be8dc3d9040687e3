from smarthome.controllers.dispatcher import CommandDispatcher
from smarthome.controllers.home_controller import SmartHomeController

__all__ = ['CommandDispatcher', 'SmartHomeController']
