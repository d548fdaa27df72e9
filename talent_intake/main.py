import argparse
import asyncio
import json
from typing import Any

from talent_intake.config.settings import Settings
from talent_intake.database.connection import close_pool, init_pool
from talent_intake.logging.logger import Log
from talent_intake.pipeline.orchestrator import build_orchestrator
from talent_intake.pipeline.responses import document_response, job_posting_response


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="talent-intake",
        description="Ingest a stored candidate document or a job posting.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    document = commands.add_parser("document", help="extract and structure an uploaded file")
    document.add_argument("--owner-id", required=True)
    document.add_argument("--file-id", required=True)

    job = commands.add_parser("job", help="acquire and analyze a job posting")
    source = job.add_mutually_exclusive_group(required=True)
    source.add_argument("--url")
    source.add_argument("--text")

    return parser.parse_args(argv)


async def _run(args: argparse.Namespace, settings: Settings) -> dict[str, Any]:
    orchestrator = build_orchestrator(settings)
    try:
        if args.command == "document":
            result = await orchestrator.ingest_document(args.owner_id, args.file_id)
            return document_response(result)
        return job_posting_response(
            await orchestrator.ingest_job_posting(url=args.url, text=args.text)
        )
    finally:
        await orchestrator.aclose()


def main(argv: list[str] | None = None) -> int:
    """Entry point: configure logging -> open pool -> run one request -> print JSON."""
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    needs_db = args.command == "document"
    if needs_db:
        init_pool(settings)
    try:
        payload = asyncio.run(_run(args, settings))
    finally:
        if needs_db:
            close_pool()

    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 0 if payload["success"] else 1


if __name__ == "__main__":
    raise SystemExit(main())
