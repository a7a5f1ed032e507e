from typing import List
from sqlmodel import create_engine, Session, SQLModel, select
from config import settings
from models import Ride

DATABASE_URL = settings.database_url


def make_engine(url: str, echo: bool = settings.debug):
    # SQLite needs check_same_thread=False; Postgres does not
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, echo=echo, connect_args=connect_args)


engine = make_engine(DATABASE_URL)


def init_db(bind=None):
    SQLModel.metadata.create_all(bind if bind is not None else engine)


class RideStore:
    """Row store for rides. All statements go through bound parameters."""

    def __init__(self, bind=None):
        self.engine = bind if bind is not None else engine

    def insert(self, values: dict) -> int:
        with Session(self.engine) as session:
            ride = Ride(**values)
            session.add(ride)
            session.commit()
            return ride.id

    def fetch(self, ride_id: int) -> List[Ride]:
        with Session(self.engine) as session:
            return list(session.exec(select(Ride).where(Ride.id == ride_id)).all())

    def page(self, offset: int, limit: int) -> List[Ride]:
        with Session(self.engine) as session:
            stmt = select(Ride).order_by(Ride.id).offset(offset).limit(limit)
            return list(session.exec(stmt).all())
