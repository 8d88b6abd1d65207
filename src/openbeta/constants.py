"""Climbing discipline constants shared by the presentation helpers."""

from __future__ import annotations

from enum import Enum


class ClimbDiscipline(str, Enum):
    TRAD = "trad"
    SPORT = "sport"
    BOULDERING = "bouldering"
    ALPINE = "alpine"
    MIXED = "mixed"
    AID = "aid"
    TR = "tr"
    SNOW = "snow"
    ICE = "ice"


# Bar chart colours, keyed by discipline name.
CLIMB_TYPE_TO_COLOR: dict[str, str] = {
    ClimbDiscipline.TRAD.value: "#F59E0B",
    ClimbDiscipline.SPORT.value: "#3B82F6",
    ClimbDiscipline.BOULDERING.value: "#10B981",
    ClimbDiscipline.ALPINE.value: "#6366F1",
    ClimbDiscipline.MIXED.value: "#8B5CF6",
    ClimbDiscipline.AID.value: "#EF4444",
    ClimbDiscipline.TR.value: "#EC4899",
    ClimbDiscipline.SNOW.value: "#94A3B8",
    ClimbDiscipline.ICE.value: "#06B6D4",
}

__all__ = ["CLIMB_TYPE_TO_COLOR", "ClimbDiscipline"]
