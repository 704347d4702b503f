import logging

from fastapi import FastAPI

import campus_grievance.config.config as configs
from campus_grievance.api.v1.route import api_router as GrievanceRouter
from campus_grievance.db.session import Base, engine
from campus_grievance.db import models  # noqa: F401

logging.basicConfig(
    level=configs.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

app = FastAPI(title="campus_grievance", version="0.1.0")
app.include_router(router=GrievanceRouter, prefix="/api")


@app.on_event("startup")
def create_tables() -> None:
    Base.metadata.create_all(bind=engine)
