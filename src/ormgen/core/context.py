"""
Run context for a generation run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

from ormgen.core.types import Schema, Table
from ormgen.utils.defaults import GeneratorProfile, profile_for_driver


@dataclass(frozen=True)
class RunContext:
    """
    Everything a generation run derives its output from.

    The schema snapshot and profile are fixed for the whole run.
    """

    schema: Schema
    profile: GeneratorProfile
    run_id: str = field(default_factory=lambda: uuid4().hex)
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        schema: Schema,
        *,
        driver: str | None = None,
        profile: GeneratorProfile | None = None,
        run_id: str | None = None,
    ) -> RunContext:
        """
        Create a run context.

        Args:
            schema: Schema snapshot to generate from
            driver: Driver name, used to pick a built-in profile when no
                profile is given
            profile: Explicit generator profile
            run_id: Optional run identifier (generated if not provided)
        """
        if profile is None:
            profile = profile_for_driver(driver or "postgres")
        kwargs = {"run_id": run_id} if run_id else {}
        return cls(schema=schema, profile=profile, **kwargs)

    @property
    def driver(self) -> str:
        return self.profile.driver

    def tables(self) -> list[Table]:
        """Tables of the snapshot that are not excluded by the profile."""
        return [t for t in self.schema.tables if not self.profile.is_excluded(t.name)]
