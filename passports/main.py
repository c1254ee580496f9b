from fastapi import FastAPI, UploadFile, File, HTTPException
from .models import ValidateResponse, HealthResponse, ValidationMode
from .parser import PassportParseError, decode_upload, parse_passports
from .report import build_report

app = FastAPI(
    title="passport-check",
    description="Passport record parsing and two-tier field validation",
    version="0.1.0",
)

@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}

@app.post("/validate", response_model=ValidateResponse)
async def validate_passports(file: UploadFile = File(...), mode: int = 2):
    raw = await file.read()
    try:
        passports = parse_passports(decode_upload(raw))
    except PassportParseError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return {"report": build_report(passports, ValidationMode.from_selector(mode))}
