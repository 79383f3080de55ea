from __future__ import annotations

from tenfold.systems.skills.skill_system import SkillSystem

__all__ = [
    "SkillSystem",
]
