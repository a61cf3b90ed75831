from fastapi import Request
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        bind=engine,
    )


def get_session_factory(request: Request) -> sessionmaker:
    return request.app.state.session_factory


def get_db(request: Request):
    db: Session = get_session_factory(request)()
    try:
        yield db
    finally:
        db.close()
