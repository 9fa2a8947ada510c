
import os
import re
import json
import datetime as dt
import logging
from logging.handlers import TimedRotatingFileHandler
from jsonschema import validate, Draft202012Validator
from jsonschema.exceptions import ValidationError
from typing import Optional, Any
from pydantic import TypeAdapter, HttpUrl

# ---------- Time helpers ----------

def now_utc():
    return dt.datetime.now(dt.timezone.utc)

# ---------- URL helpers ----------

_HTTP_URL_ADAPTER = TypeAdapter(HttpUrl)

def normalize_http_url(value: Any) -> Optional[str]:
    """Try to normalize a value into a valid http(s) URL string.

    - Trims whitespace and trailing slashes
    - Adds scheme when missing (defaults to https://)
    Returns normalized string on success; otherwise None.
    """
    if value is None:
        return None
    s = str(value).strip().rstrip("/")
    if not s:
        return None
    if s.startswith("//"):
        s = "https:" + s
    if not re.match(r"^[a-zA-Z][a-zA-Z0-9+.-]*://", s):
        s = "https://" + s
    try:
        _HTTP_URL_ADAPTER.validate_python(s)
        return s
    except Exception:
        return None

# ---------- Config validation ----------

def load_file(path: str) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()

def validate_config(cfg: dict):
    here = os.path.dirname(os.path.abspath(__file__))
    schema_path = os.path.join(here, "schemas", "config.schema.json")
    schema = json.loads(load_file(schema_path))
    try:
        validate(instance=cfg, schema=schema, cls=Draft202012Validator)
    except ValidationError as e:
        raise ValueError(f"Config validation error: {e.message} at {list(e.path)}") from e

# ---------- Output writer ----------

def write_output(human_md: str, json_obj: dict, out_cfg: dict):
    out_dir = out_cfg["dir"]
    formats = out_cfg.get("formats", ["md", "json"])
    os.makedirs(out_dir, exist_ok=True)
    now_local = dt.datetime.now().astimezone()
    ts = now_local.strftime("%Y%m%dT%H%M%S%z")
    base = os.path.join(out_dir, f"scan_{ts}")

    generated_files = []

    if "md" in formats:
        md_path = base + ".md"
        with open(md_path, "w", encoding="utf-8") as f:
            f.write(human_md)
        generated_files.append(md_path)

    if "json" in formats:
        json_path = base + ".json"
        with open(json_path, "w", encoding="utf-8") as f:
            json.dump(json_obj, f, ensure_ascii=False, indent=2)
        generated_files.append(json_path)

    return generated_files

# ---------- Logging ----------

_LOGGER_INITIALIZED = False

class JsonFormatter(logging.Formatter):
    def format(self, record):
        payload = {
            "ts": dt.datetime.fromtimestamp(record.created, dt.timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)

def _build_logger():
    global _LOGGER_INITIALIZED
    if _LOGGER_INITIALIZED:
        return

    level = os.getenv("LOG_LEVEL", "INFO").upper()
    log_dir = os.getenv("LOG_DIR", "logs")
    json_mode = os.getenv("LOG_JSON", "false").lower() == "true"

    os.makedirs(log_dir, exist_ok=True)
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level, logging.INFO))

    ch = logging.StreamHandler()
    ch.setLevel(logger.level)

    fh = TimedRotatingFileHandler(os.path.join(log_dir, "sentinel.log"), when="D", backupCount=7, encoding="utf-8")
    fh.setLevel(logger.level)

    if json_mode:
        fmt = JsonFormatter()
    else:
        fmt = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")

    ch.setFormatter(fmt)
    fh.setFormatter(fmt)
    logger.addHandler(ch)
    logger.addHandler(fh)

    _LOGGER_INITIALIZED = True

def get_logger(name: str = None) -> logging.Logger:
    _build_logger()
    return logging.getLogger(name if name else __name__)

# ---------- Secret redaction ----------

def redact_secrets(s: str, extra_env_keys: Optional[list] = None) -> str:
    """Redact sensitive information from strings for safe logging."""
    if not s:
        return s

    env_keys = ["SENTINEL_API_KEY", "SUPABASE_KEY", "SUPABASE_ANON_KEY"] + list(extra_env_keys or [])

    redacted = s
    for k in env_keys:
        v = os.getenv(k)
        if v and len(v) > 3:
            redacted = redacted.replace(v, "***")

    pattern_flags = re.IGNORECASE
    redacted = re.sub(r"(apikey=)([^\s&]+)", r"\1***", redacted, flags=pattern_flags)
    redacted = re.sub(r"(api_key=)([^\s&]+)", r"\1***", redacted, flags=pattern_flags)
    redacted = re.sub(r"(token=)([^\s&]+)", r"\1***", redacted, flags=pattern_flags)
    redacted = re.sub(r"(bearer\s+)[A-Za-z0-9._-]+", r"\1***", redacted, flags=pattern_flags)

    return redacted
