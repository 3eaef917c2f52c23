from datetime import datetime, timezone
from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    func,
)
from sqlalchemy.orm import relationship

from .session import Base


class Advocate(Base):
    __tablename__ = "advocates"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    city = Column(String(255), nullable=False)
    degree = Column(String(50), nullable=False)
    years_of_experience = Column(Integer, nullable=False, default=0)
    phone_number = Column(BigInteger, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=lambda: datetime.now(timezone.utc))

    specialty_rows = relationship(
        "AdvocateSpecialty",
        back_populates="advocate",
        order_by="AdvocateSpecialty.position",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def specialties(self) -> list[str]:
        return [s.name for s in self.specialty_rows]

    __table_args__ = (
        CheckConstraint("years_of_experience >= 0", name="ck_advocates_years_of_experience_non_negative"),
        Index("ix_advocates_degree", "degree"),
        Index("ix_advocates_years_of_experience", "years_of_experience"),
    )


class AdvocateSpecialty(Base):
    """One specialty label of an advocate; position keeps the list order."""
    __tablename__ = "advocate_specialties"

    id = Column(Integer, primary_key=True, autoincrement=True)
    advocate_id = Column(Integer, ForeignKey("advocates.id", ondelete="CASCADE"), nullable=False)
    position = Column(Integer, nullable=False, default=0)
    name = Column(String(255), nullable=False)

    advocate = relationship("Advocate", back_populates="specialty_rows")

    __table_args__ = (
        Index("ix_advocate_specialties_advocate_id_position", "advocate_id", "position", unique=True),
    )
