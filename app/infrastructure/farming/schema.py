"""
Relational schema for the farming bounded context.

Referential actions are owned by the database:
- deleting a farm unassigns its crops (crops.farm_id SET NULL)
- deleting a crop or fertilizer removes its association rows (CASCADE)

crop_fertilizers has a surrogate key and no unique constraint on the
(crop_id, fertilizer_id) pair, so a pair may be stored more than once.
"""

from sqlalchemy import Column, Date, Float, ForeignKey, Integer, MetaData, String, Table

metadata = MetaData()

farms = Table(
    "farms",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("size", Float, nullable=False),
    sqlite_autoincrement=True,
)

crops = Table(
    "crops",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("planted_area", Float, nullable=False),
    Column("planted_date", Date, nullable=True),
    Column("harvest_date", Date, nullable=True),
    Column(
        "farm_id",
        Integer,
        ForeignKey("farms.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    ),
    sqlite_autoincrement=True,
)

fertilizers = Table(
    "fertilizers",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("brand", String(255), nullable=False, default=""),
    Column("composition", String(1024), nullable=False, default=""),
    sqlite_autoincrement=True,
)

crop_fertilizers = Table(
    "crop_fertilizers",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "crop_id",
        Integer,
        ForeignKey("crops.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    Column(
        "fertilizer_id",
        Integer,
        ForeignKey("fertilizers.id", ondelete="CASCADE"),
        nullable=False,
    ),
    sqlite_autoincrement=True,
)
