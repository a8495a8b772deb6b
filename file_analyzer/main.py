import logging

from fastapi import FastAPI, UploadFile, Depends, Query, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse

from file_analyzer import config
from file_analyzer.core.analyzer import (
    build_table_analysis,
    column_cells,
    numeric_values,
    order_columns,
)
from file_analyzer.core.cells import normalize, present_values
from file_analyzer.core.errors import AnalysisError
from file_analyzer.core.histogram import build_histogram
from file_analyzer.core.ingest import check_file_name, parse_table
from file_analyzer.core.scatter import build_scatter
from file_analyzer.services.report import generate_csv
from file_analyzer.storage.file_store import FileStore

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

# --------------------------------------------------
# App Init
# --------------------------------------------------

app = FastAPI(title="File Analyzer")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

file_store = FileStore()


def get_store() -> FileStore:
    return file_store


def get_stored(file_name: str, store: FileStore):
    stored = store.get(file_name)
    if stored is None:
        raise HTTPException(status_code=404, detail="File not found")
    return stored

# --------------------------------------------------
# Upload & Analyze
# --------------------------------------------------

@app.post("/upload")
async def upload(file: UploadFile, store: FileStore = Depends(get_store)):
    try:
        file_name = check_file_name(file.filename)
    except AnalysisError as e:
        logger.warning("Rejected upload %r: %s", file.filename, e)
        raise HTTPException(status_code=400, detail=str(e))

    content = await file.read(config.MAX_UPLOAD_BYTES + 1)
    if len(content) > config.MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail="File too large")

    try:
        text = content.decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="File is not valid UTF-8 text")

    try:
        table = parse_table(text)
        analysis = build_table_analysis(table, file_name=file_name)
    except AnalysisError as e:
        logger.warning("Analysis of %s failed: %s", file_name, e)
        raise HTTPException(status_code=400, detail=f"Error processing file: {e}")

    store.save(table, analysis)
    logger.info(
        "Stored %s (%d rows, %d columns)", file_name, analysis.row_count, analysis.column_count
    )
    return analysis.model_dump(mode="json")

# --------------------------------------------------
# Stored Files
# --------------------------------------------------

@app.get("/files")
def list_files(store: FileStore = Depends(get_store)):
    return store.list_files()


@app.get("/files/{file_name}")
def file_analysis(
    file_name: str,
    sort: str = Query("default", description="'default' or 'type'"),
    store: FileStore = Depends(get_store),
):
    analysis = get_stored(file_name, store).analysis
    try:
        ordered = order_columns(analysis, sort)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    result = analysis.model_dump(mode="json")
    result["columnAnalysis"] = {
        column: stats.model_dump(mode="json") for column, stats in ordered.items()
    }
    return result


@app.delete("/files/{file_name}")
def delete_file(file_name: str, store: FileStore = Depends(get_store)):
    if not store.delete(file_name):
        raise HTTPException(status_code=404, detail="File not found")
    return {"status": "deleted"}

# --------------------------------------------------
# Charts & Report
# --------------------------------------------------

def numeric_column_cells(stored, column: str) -> list:
    keys = list(stored.analysis.column_analysis)
    if column not in keys:
        raise HTTPException(status_code=404, detail=f"Column '{column}' not found")

    if not stored.analysis.column_analysis[column].data_type.is_numeric:
        raise HTTPException(status_code=400, detail=f"Column '{column}' is not numeric")

    return column_cells(stored.table, keys.index(column))


@app.get("/files/{file_name}/histogram/{column}")
def histogram(
    file_name: str,
    column: str,
    bins: int = Query(None, ge=1, le=500),
    store: FileStore = Depends(get_store),
):
    cells = numeric_column_cells(get_stored(file_name, store), column)
    values = numeric_values(present_values(map(normalize, cells)))
    return build_histogram(values, bins).model_dump(mode="json")


@app.get("/files/{file_name}/scatter")
def scatter(
    file_name: str,
    x: str = Query(..., description="X column"),
    y: str = Query(..., description="Y column"),
    store: FileStore = Depends(get_store),
):
    stored = get_stored(file_name, store)
    x_cells = numeric_column_cells(stored, x)
    y_cells = numeric_column_cells(stored, y)
    return build_scatter(x_cells, y_cells).model_dump(mode="json")


@app.get("/files/{file_name}/report.csv")
def report(
    file_name: str,
    sort: str = Query("default", description="'default' or 'type'"),
    store: FileStore = Depends(get_store),
):
    analysis = get_stored(file_name, store).analysis
    try:
        output = generate_csv(analysis, sort)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    stem = file_name.rsplit(".", 1)[0]
    return StreamingResponse(
        iter([output.getvalue()]),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{stem}_report.csv"'},
    )

# --------------------------------------------------
# Health Check
# --------------------------------------------------

@app.get("/")
def root():
    return {
        "status": "ok",
        "service": "File Analyzer",
        "features": [
            "csv upload",
            "type inference",
            "column statistics",
            "data preview",
            "histograms",
            "scatter plots",
            "csv report",
        ],
    }
