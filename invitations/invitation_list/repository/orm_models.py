from sqlalchemy import Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from invitations.config.table_names import TableNames
from invitations.models.base import Base, TimeStamp


class HouseholdRow(Base, TimeStamp):
    __tablename__ = TableNames.HOUSEHOLDS.value

    # Ids are assigned by the invitation list, not by the database
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    code: Mapped[str] = mapped_column(String(32), nullable=False, unique=True, index=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)

    members: Mapped[list["GuestRow"]] = relationship(
        "GuestRow",
        back_populates="household",
        order_by="GuestRow.household_position",
    )

    def __repr__(self) -> str:
        return f"<Household {self.id} {self.code}>"


class GuestRow(Base, TimeStamp):
    __tablename__ = TableNames.GUESTS.value

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    dietary_requirements: Mapped[str | None] = mapped_column(Text, nullable=True)
    # None until the guest responds
    attending: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    is_child: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    household_id: Mapped[int | None] = mapped_column(
        ForeignKey(f"{TableNames.HOUSEHOLDS.value}.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    household: Mapped["HouseholdRow | None"] = relationship("HouseholdRow", back_populates="members")

    # Order of the guest inside its household roster and inside the whole list
    household_position: Mapped[int | None] = mapped_column(Integer, nullable=True)
    list_position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<Guest {self.name}>"


class InvitationListVersionRow(Base, TimeStamp):
    """Single row holding the optimistic concurrency token of the list."""

    __tablename__ = TableNames.INVITATION_LIST_VERSIONS.value

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
