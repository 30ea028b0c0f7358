"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Record:
    """Win/loss record of a team."""

    wins: int = 0
    losses: int = 0

    def __post_init__(self) -> None:
        if self.wins < 0:
            raise ValueError("Wins cannot be negative")
        if self.losses < 0:
            raise ValueError("Losses cannot be negative")

    @property
    def games_played(self) -> int:
        return self.wins + self.losses

    @property
    def win_rate(self) -> float:
        """Percentage of games won, rounded to 2 decimals."""
        if self.games_played == 0:
            return 0.0
        return round(self.wins / self.games_played * 100, 2)

    def __str__(self) -> str:
        return f"{self.wins}-{self.losses}"
