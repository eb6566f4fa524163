from pathlib import Path

from app.gql.schema import schema

script_dir = Path(__file__).resolve().parent
schema_path = script_dir.parent / "schema.graphql"


def export_schema() -> None:
    schema_path.write_text(schema.as_str() + "\n", encoding="utf-8")
    print(f"Wrote GraphQL schema to {schema_path}")


if __name__ == "__main__":
    export_schema()
