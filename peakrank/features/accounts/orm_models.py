"""SQLAlchemy 2.0 ORM model for stored player accounts."""

from typing import Optional

from sqlalchemy import Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from peakrank.core.models import Base


class AccountORM(Base):
    """A player's account with the peak rank they reported for it.

    Rows are created and deleted but never updated in place.
    """

    __tablename__ = "accounts"
    __table_args__ = (Index("idx_accounts_player", "player"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Owner of the account; groups records for bulk deletion
    player: Mapped[str] = mapped_column(String(128), nullable=False)

    # Riot ID in name#tag form
    riot_id: Mapped[str] = mapped_column(String(128), nullable=False)

    # User-facing server label (e.g. "euw")
    server: Mapped[str] = mapped_column(String(16), nullable=False)

    # Peak rank as supplied by the caller, never derived from live lookups
    peak_rank: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    peak_division: Mapped[Optional[str]] = mapped_column(String(8), nullable=True)
    peak_lp: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    def __repr__(self) -> str:
        return f"<AccountORM(id={self.id}, player='{self.player}', riot_id='{self.riot_id}')>"
