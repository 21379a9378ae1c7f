"""
FastAPI приложение для построения диаграммы бронирований столов
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, UploadFile, File, HTTPException, Request
from fastapi.responses import HTMLResponse, Response
from fastapi.templating import Jinja2Templates

from core.composer import ChartComposer
from core.config import load_chart_config
from core.errors import ChartError
from utils.csv_reader import read_reservations
from utils.logging_config import setup_logging
from utils.visualization import encode_png, render_chart, to_data_uri

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent
CONFIG_PATH = BASE_DIR / "data/configs/chart_config.json"

chart_config = load_chart_config(CONFIG_PATH if CONFIG_PATH.exists() else None)
composer = ChartComposer(chart_config)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Логи настраиваются при запуске и через uvicorn main:app"""
    setup_logging()
    yield


app = FastAPI(title="Reservation Gantt Chart", lifespan=lifespan)

# Templates
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))


def _build_chart(csv_file: UploadFile):
    """CSV -> (скомпонованная диаграмма, PNG), ошибки -> HTTPException"""
    try:
        reservations = read_reservations(csv_file.file)
    except ValueError as e:
        raise HTTPException(400, f"Cannot read CSV: {e}")

    try:
        composed = composer.compose(reservations)
    except ChartError as e:
        logger.warning("Chart rejected for %s: %s", csv_file.filename, e)
        raise HTTPException(422, str(e))

    image = render_chart(composed, chart_config, composer.style)
    logger.info("Chart built for %s (%d reservations)", csv_file.filename, len(reservations))
    return reservations, composed, encode_png(image)


@app.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """Главная страница"""
    return templates.TemplateResponse(request, "index.html")


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "reservation-gantt"}


@app.post("/api/chart")
async def create_chart(file: UploadFile = File(...)):
    """
    Построить диаграмму по CSV

    Returns:
        {"image": "data:image/png;base64,...", "warnings": [...], ...}
    """
    reservations, composed, png = _build_chart(file)

    return {
        "image": to_data_uri(png),
        "reservations": len(reservations),
        "bars": len(composed.bars),
        "warnings": [str(w) for w in composed.warnings],
        "window": {
            "first_hour": composed.window.first_hour,
            "last_hour": composed.window.last_hour,
        },
    }


@app.post("/api/chart/png")
async def create_chart_png(file: UploadFile = File(...)):
    """
    Скачать PNG диаграммы
    """
    _, _, png = _build_chart(file)
    return Response(
        content=png,
        media_type="image/png",
        headers={"Content-Disposition": 'attachment; filename="reservations_chart.png"'},
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=5000)
