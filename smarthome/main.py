#!/usr/bin/env python3
"""
Smart Home Automation System - interactive simulator
"""

import sys

from smarthome.components import DEVICE_TYPES
from smarthome.controllers import SmartHomeController
from smarthome.outcome import OutcomeKind
from smarthome.settings import load_settings

EXIT_COMMANDS = ('exit', 'quit')

BANNER = r"""
  ____                       _     _   _
 / ___| _ __ ___   __ _ _ __| |_  | | | | ___  _ __ ___   ___
 \___ \| '_ ` _ \ / _` | '__| __| | |_| |/ _ \| '_ ` _ \ / _ \
  ___) | | | | | | (_| | |  | |_  |  _  | (_) | | | | | |  __/
 |____/|_| |_| |_|\__,_|_|   \__| |_| |_|\___/|_| |_| |_|\___|
"""


def show_banner():
    print(BANNER)
    print("Welcome to the Smart Home Automation System!")


def show_help():
    """Display help menu"""
    print("""
==================================================
COMMANDS
==================================================
  list                   List all devices
  on <device>            Turn on a device
  off <device>           Turn off a device
  status <device>        Check device status
  set <device> <value>   Adjust device setting
  show                   Show status of all devices
  add <type> <name>      Add a device (%s)
  history [n]            Show last n commands (all if n not given)
  save <filename>        Save command history to file
  help                   Show this menu
  exit                   Exit the program
==================================================""" % '/'.join(DEVICE_TYPES))


# ========== BUILT-IN COMMANDS ==========

def list_devices(controller):
    print("\nDevices in the Smart Home:")
    for name in controller.list_devices():
        print(f"- {name}")


def show_status(controller):
    print("\nDevice Statuses:")
    for status in controller.get_status():
        print(status)


def show_history(controller, arg):
    if arg:
        try:
            limit = int(arg)
        except ValueError:
            print("[ERROR] Invalid history command format")
            return
    else:
        limit = None
    print("\nCommand History:")
    for entry in controller.get_history(limit):
        print(entry)


def save_history(controller, filename):
    if not filename:
        print("[ERROR] Please specify a filename")
        return
    try:
        controller.save_history(filename)
    except OSError as e:
        print(f"[ERROR] Unable to create history file: {e}")
        return
    print(f"[OK] History saved to {filename}")


def add_device(controller, arg):
    kind, _, name = arg.partition(' ')
    if not kind or not name:
        print("[ERROR] Usage: add <type> <name>")
        return
    try:
        device = controller.add_device(kind, name)
    except ValueError as e:
        print(f"[ERROR] {e}")
        return
    print(f"[OK] Added {device.kind} '{device.name}'")


def handle_builtin(controller, line):
    """Run a built-in command. Returns False if the line is not one."""
    cmd, _, arg = line.strip().partition(' ')
    arg = arg.strip()

    if cmd == 'help' and not arg:
        show_help()
    elif cmd == 'list' and not arg:
        list_devices(controller)
    elif cmd == 'show' and not arg:
        show_status(controller)
    elif cmd == 'history':
        show_history(controller, arg)
    elif cmd == 'save':
        save_history(controller, arg)
    elif cmd == 'add':
        add_device(controller, arg)
    else:
        return False
    return True


def print_outcome(outcome):
    if outcome.value is not None:
        print(outcome.value)
    elif outcome.kind is OutcomeKind.OK:
        print(f"[OK] {outcome.message}")
    elif outcome.kind is OutcomeKind.WARNING:
        print(f"[WARN] {outcome.message}")
    else:
        print(f"[ERROR] {outcome.message}")


# ========== MAIN LOOP ==========

def run(controller):
    """Read and execute commands until exit, EOF or Ctrl-C"""
    while True:
        try:
            line = input("\nEnter a command: ")
        except (KeyboardInterrupt, EOFError):
            print()
            break

        if not line.strip():
            continue
        if line.strip() in EXIT_COMMANDS:
            break
        if handle_builtin(controller, line):
            continue

        print_outcome(controller.execute_command(line))


def main():
    """Main entry point"""
    settings = load_settings()

    try:
        controller = SmartHomeController(settings)
    except OSError as e:
        print(f"[SYSTEM] Unable to open log file: {e}")
        return 1
    except ValueError as e:
        print(f"[SYSTEM] Invalid settings: {e}")
        return 1

    controller.start()
    show_banner()
    show_help()

    try:
        run(controller)
    finally:
        controller.cleanup()

    print("Thank you for using the Smart Home Automation System!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
