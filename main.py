import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from core import config
from core.errors import register_exception_handlers
from database import Base, engine

# every table has to be registered before create_all
from model import (  # noqa: F401
    appointment_model,
    consultation_model,
    conversation_model,
    health_model,
    hospital_model,
    prescription_model,
    rfid_model,
    user_model,
)
from routers import (
    appointment_router,
    auth_router,
    chatbot_router,
    consultation_router,
    doctor_router,
    health_router,
    hospital_router,
    prescription_router,
    rfid_router,
    user_router,
)

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("medi_server")

Base.metadata.create_all(bind=engine)
app = FastAPI(title="Medi-Server API", version="1.0.0", description="Medical Appointment Management System API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_exception_handlers(app)

config.UPLOAD_DIR.mkdir(parents=True, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=config.UPLOAD_DIR), name="uploads")


@app.get("/")
def read_root():
    return {"success": True, "message": "Welcome to Medi-Server API. Visit /docs for documentation."}


app.include_router(auth_router.router)
app.include_router(user_router.router)
app.include_router(doctor_router.router)
app.include_router(hospital_router.router)
app.include_router(appointment_router.router)
app.include_router(consultation_router.router)
app.include_router(prescription_router.router)
app.include_router(rfid_router.router)
app.include_router(health_router.router)
app.include_router(chatbot_router.router)

logger.info("Medi-Server ready with %d routes", len(app.routes))

# uvicorn main:app --reload
