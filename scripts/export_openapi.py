"""Write the OpenAPI document of the Recipes API to docs/openapi.json."""

from pathlib import Path

import orjson
from fastapi.openapi.utils import get_openapi

from recipes_api.main import app


def main() -> None:
    """Render the schema of every mounted route."""
    schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )
    target = Path("docs/openapi.json")
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(orjson.dumps(schema, option=orjson.OPT_INDENT_2))


if __name__ == "__main__":
    main()
