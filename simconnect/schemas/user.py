import enum
from pydantic import BaseModel, Field


class UserLevel(str, enum.Enum):
    NOVICE = "Novice"
    EXPLORER = "Explorer"
    EXPERT = "Expert"
    MASTER = "Master"
    LEGEND = "Legend"


# Minimum points per tier, highest first.
LEVEL_THRESHOLDS = [
    (1000, UserLevel.LEGEND),
    (500, UserLevel.MASTER),
    (250, UserLevel.EXPERT),
    (100, UserLevel.EXPLORER),
    (0, UserLevel.NOVICE),
]
LEGEND_POINTS = LEVEL_THRESHOLDS[0][0]


def level_for_points(points: int) -> UserLevel:
    for threshold, level in LEVEL_THRESHOLDS:
        if points >= threshold:
            return level
    return UserLevel.NOVICE


class UserProfile(BaseModel):
    name: str = ""
    points: int = Field(default=0, ge=0)
    level: UserLevel = UserLevel.NOVICE
    badges: list[str] = Field(default_factory=list)
    contributions: int = Field(default=0, ge=0)
    contributed_countries: list[str] = Field(default_factory=list)
    contributed_plans: int = Field(default=0, ge=0)


class UserProfileOut(UserProfile):
    next_level: UserLevel | None
    points_to_legend: int
    legend_progress_percent: float

    @classmethod
    def from_profile(cls, profile: UserProfile) -> "UserProfileOut":
        next_level = None
        for threshold, level in reversed(LEVEL_THRESHOLDS):
            if profile.points < threshold:
                next_level = level
                break
        return cls(
            **profile.model_dump(),
            next_level=next_level,
            points_to_legend=max(0, LEGEND_POINTS - profile.points),
            legend_progress_percent=round(min(profile.points / LEGEND_POINTS * 100, 100.0), 1),
        )
