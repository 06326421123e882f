#!/usr/bin/env python3
"""
Taskify CLI - Main Entry Point
"""
import argparse
import logging
import sys

from database import Database, DataError
from log_config import setup_logging
from settings import Settings
from tui.app import TaskifyApp

logger = logging.getLogger("taskify")


def add_project(db: Database, name: str, description: str = ""):
    """Add a new project"""
    project = db.add_project(name, description)
    print(f"✅ Project '{project.name}' created ({project.id})")


def list_projects(db: Database, settings: Settings, page: int = 0):
    """Print one page of projects"""
    page_size = settings.page_size
    projects = db.get_projects_page(page, page_size)
    total = db.count_projects()

    if not projects:
        if total == 0:
            print("\n📋 No projects found.")
            print("   Run 'add-project NAME' to create one.")
        else:
            print(f"\n📋 Page {page + 1} is empty ({total} projects in total).")
        return

    print(f"\n📋 Projects (page {page + 1}, {total} in total):")
    print("=" * 80)
    for project in projects:
        created = project.created.strftime('%d.%m.%Y') if project.created else ""
        print(f"  {project.name:<32} {created:<12} {project.id}")
        if project.description:
            print(f"      {project.description}")
    print("=" * 80)


def run_tui(db: Database, settings: Settings):
    app = TaskifyApp(db, settings)
    app.run()


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Taskify - modern CLI task management',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Open the interactive terminal UI
  %(prog)s tui

  # Add a project
  %(prog)s add-project "Website" --description "Company homepage relaunch"

  # List the second page of projects
  %(prog)s list-projects --page 2
        """
    )

    parser.add_argument(
        'command',
        nargs='?',
        default='tui',
        choices=['tui', 'add-project', 'list-projects'],
        help='Command to execute (default: tui)'
    )

    parser.add_argument(
        'name',
        nargs='?',
        help='Project name (required for add-project)'
    )

    parser.add_argument(
        '--description',
        default='',
        help='Project description (add-project)'
    )

    parser.add_argument(
        '--page',
        type=int,
        default=1,
        help='Page to show, starting at 1 (list-projects)'
    )

    parser.add_argument(
        '--config',
        default='config.json',
        help='Settings file path (default: config.json)'
    )

    parser.add_argument(
        '--db',
        default=None,
        help='Database file path (default: from settings)'
    )

    args = parser.parse_args(argv)

    # Initialize settings, logging and database
    settings = Settings(args.config)
    setup_logging(settings)
    db = Database(args.db or settings.database_path)

    try:
        if args.command == 'add-project':
            if not args.name:
                print("❌ Error: Please specify a project name.")
                parser.print_help()
                sys.exit(1)
            add_project(db, args.name, args.description)

        elif args.command == 'list-projects':
            if args.page < 1:
                print("❌ Error: --page starts at 1.")
                sys.exit(1)
            list_projects(db, settings, args.page - 1)

        elif args.command == 'tui':
            run_tui(db, settings)

    except KeyboardInterrupt:
        print("\n\n👋 Goodbye!")
        sys.exit(0)
    except (DataError, ValueError) as e:
        logger.error("%s failed: %s", args.command, e)
        print(f"\n❌ Error: {e}")
        sys.exit(1)
    finally:
        db.close()


if __name__ == "__main__":
    main()
