from sqlalchemy import Column, Integer, JSON

from interval_lookup.db.database import Base

# Each flag column holds [gasoline, electric, hybrid]
CATEGORY_FIELDS = (
    "engine_oil",
    "tire_rotation",
    "brake_fluid",
    "transmission_fluid",
    "differential_fluid",
    "coolant",
    "air_filter",
    "cabin_filter",
)


class IntervalRecord(Base):
    __tablename__ = "service_intervals"

    id = Column(Integer, primary_key=True, autoincrement=False)  # bucket mileage
    engine_oil = Column(JSON, nullable=False)
    tire_rotation = Column(JSON, nullable=False)
    brake_fluid = Column(JSON, nullable=False)
    transmission_fluid = Column(JSON, nullable=False)
    differential_fluid = Column(JSON, nullable=False)
    coolant = Column(JSON, nullable=False)
    air_filter = Column(JSON, nullable=False)
    cabin_filter = Column(JSON, nullable=False)
