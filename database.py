"""
Database setup and management for taskify using SQLAlchemy
"""
import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import create_engine, Column, String, Text, DateTime, Index
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

logger = logging.getLogger(__name__)

Base = declarative_base()

PROJECT_NAME_MAX = 32


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DataError(Exception):
    """A storage operation failed"""


class Project(Base):
    __tablename__ = 'projects'

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(PROJECT_NAME_MAX), nullable=False)
    description = Column(Text, default="")
    created = Column(DateTime, default=utcnow)
    edited = Column(DateTime, default=utcnow)

    __table_args__ = (
        Index('idx_projects_id', 'id'),
        Index('idx_projects_created', 'created'),
    )

    def set_name(self, name: str):
        """Rename the project and mark it edited"""
        _check_name(name)
        self.name = name
        self.touch()

    def set_description(self, description: str):
        """Replace the description and mark it edited"""
        self.description = description
        self.touch()

    def touch(self):
        self.edited = utcnow()

    def __repr__(self):
        return f"<Project(id='{self.id}', name='{self.name}')>"


def _check_name(name: str):
    if not name or not name.strip():
        raise ValueError("Project name cannot be empty")
    if len(name) > PROJECT_NAME_MAX:
        raise ValueError(f"Project name must be at most {PROJECT_NAME_MAX} characters")


class Database:
    def __init__(self, db_path: str = "taskify.db"):
        self.db_path = db_path
        self.engine = create_engine(f'sqlite:///{db_path}')
        Base.metadata.create_all(self.engine)
        Session = sessionmaker(bind=self.engine)
        self.session = Session()
        logger.info("Opened database %s", db_path)

    def add_project(self, name: str, description: str = "") -> Project:
        """Add a new project with a fresh id and created/edited set to now"""
        _check_name(name)
        now = utcnow()
        project = Project(
            id=str(uuid.uuid4()),
            name=name,
            description=description,
            created=now,
            edited=now,
        )
        self.session.add(project)
        self._commit()
        logger.info("Added project %s (%s)", project.name, project.id)
        return project

    def get_project(self, project_id: str) -> Optional[Project]:
        """Get project by id"""
        return self.session.get(Project, project_id)

    def update_project(self, project: Project, name: Optional[str] = None,
                       description: Optional[str] = None) -> Project:
        """Update name and/or description of a project"""
        if name is not None:
            project.set_name(name)
        if description is not None:
            project.set_description(description)
        self._commit()
        return project

    def delete_project(self, project: Project):
        """Delete a project"""
        self.session.delete(project)
        self._commit()
        logger.info("Deleted project %s", project.id)

    def count_projects(self) -> int:
        """Number of stored projects"""
        return self.session.query(Project).count()

    def get_projects_page(self, page: int, page_size: int) -> List[Project]:
        """
        Get one page of projects, oldest first

        Args:
            page: Zero-based page number
            page_size: Number of projects per page
        """
        if page < 0 or page_size < 1:
            raise ValueError("page must be >= 0 and page_size >= 1")
        return self.session.query(Project).order_by(
            Project.created.asc(),
            Project.id.asc(),
        ).offset(page * page_size).limit(page_size).all()

    async def list_records(self, page: int, page_size: int) -> List[Project]:
        """Fetch a page of projects for the TUI, raising DataError on failure"""
        try:
            return self.get_projects_page(page, page_size)
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.warning("Listing projects failed (page=%s): %s", page, e)
            raise DataError(str(e)) from e

    def _commit(self):
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise DataError(str(e)) from e

    def close(self):
        """Close database connection"""
        self.session.close()
