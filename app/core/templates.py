from pathlib import Path

from fastapi.templating import Jinja2Templates

# Initialize templates once
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))
