from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.constants import DEFAULT_POOL_SIZE
from .database.connection import DBConfig, DatabaseConnection
from .submissions.mysql_submission_repository import MySQLSubmissionRepository
from .submissions.service import SubmissionService


@dataclass(frozen=True)
class Container:
    submission_service: SubmissionService
    conn: Optional[DatabaseConnection] = None

    def close(self) -> None:
        if self.conn is not None:
            self.conn.close()


def build_container(*, db_config: dict, pool_size: int = DEFAULT_POOL_SIZE) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config, pool_size=pool_size)).open()

    submissions_repo = MySQLSubmissionRepository(conn)
    submission_service = SubmissionService(submissions_repo)

    return Container(conn=conn, submission_service=submission_service)
