#!/usr/bin/env python3
"""
Employee management CLI.
Run this script to add, inspect, modify, or remove employee records
in the configured SQLite database.

Usage:
    python manage_employees.py add <name> <email> <role>
    python manage_employees.py list
    python manage_employees.py show <id>
    python manage_employees.py update <id> <name> <email> <role>
    python manage_employees.py delete <id>
"""

import sys

from app.application.services import EmployeeNotFoundError, EmployeeService
from app.database import close_db, get_db, init_db
from app.infrastructure.repositories import EmployeeRepository


def print_usage():
    print(__doc__)


def get_service() -> EmployeeService:
    return EmployeeService(EmployeeRepository(get_db()))


def parse_id(value: str) -> int | None:
    try:
        return int(value)
    except ValueError:
        print(f"Error: '{value}' is not a valid employee id")
        return None


def cmd_add(args):
    if len(args) < 3:
        print("Error: add requires <name> <email> <role>")
        print("Example: python manage_employees.py add ravi ravi@gmail.com developer")
        return 1

    name, email, role = args[0], args[1], args[2]
    employee = get_service().create_employee(name, email, role)
    print(f"Employee '{name}' created successfully (ID: {employee.id})")
    return 0


def cmd_list(args):
    employees = get_service().list_employees()
    if not employees:
        print("No employees found. Create one with: python manage_employees.py add <name> <email> <role>")
        return 0

    print(f"{'ID':<5} {'Name':<25} {'Email':<35} {'Role'}")
    print("-" * 80)
    for employee in employees:
        print(f"{employee.id:<5} {employee.name:<25} {employee.email:<35} {employee.role}")
    return 0


def cmd_show(args):
    if len(args) < 1:
        print("Error: show requires <id>")
        return 1

    employee_id = parse_id(args[0])
    if employee_id is None:
        return 1

    try:
        employee = get_service().get_employee(employee_id)
    except EmployeeNotFoundError as e:
        print(f"Error: {e.detail}")
        return 1

    print(f"ID:    {employee.id}")
    print(f"Name:  {employee.name}")
    print(f"Email: {employee.email}")
    print(f"Role:  {employee.role}")
    return 0


def cmd_update(args):
    if len(args) < 4:
        print("Error: update requires <id> <name> <email> <role>")
        return 1

    employee_id = parse_id(args[0])
    if employee_id is None:
        return 1

    try:
        get_service().update_employee(employee_id, args[1], args[2], args[3])
    except EmployeeNotFoundError as e:
        print(f"Error: {e.detail}")
        return 1

    print(f"Employee {employee_id} updated")
    return 0


def cmd_delete(args):
    if len(args) < 1:
        print("Error: delete requires <id>")
        return 1

    employee_id = parse_id(args[0])
    if employee_id is None:
        return 1

    service = get_service()
    try:
        employee = service.get_employee(employee_id)
    except EmployeeNotFoundError as e:
        print(f"Error: {e.detail}")
        return 1

    # Confirm deletion
    confirm = input(f"Delete employee {employee_id} ({employee.name})? [y/N]: ")
    if confirm.lower() != 'y':
        print("Cancelled")
        return 0

    service.delete_employee(employee_id)
    print(f"Employee {employee_id} deleted")
    return 0


def cmd_help(args):
    print_usage()
    return 0


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) < 1:
        print_usage()
        return 1

    command = argv[0].lower()
    args = argv[1:]

    commands = {
        'add': cmd_add,
        'list': cmd_list,
        'show': cmd_show,
        'update': cmd_update,
        'delete': cmd_delete,
    }

    if command == 'help':
        return cmd_help(args)

    if command not in commands:
        print(f"Unknown command: {command}")
        print_usage()
        return 1

    # Initialize database
    init_db()
    try:
        return commands[command](args)
    finally:
        close_db()


if __name__ == "__main__":
    sys.exit(main())
