"""Command-line entry point for Inbox Triage."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path

from inbox_triage.core import AppSettings, configure_logging, load_app_settings
from inbox_triage.core.models import EmailInput, TriageResult
from inbox_triage.intelligence import OllamaClient, build_triage_service


def build_parser() -> argparse.ArgumentParser:
    """Create and configure the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Inbox Triage email classifier")
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Path to a .env file containing configuration overrides.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default="info",
        choices=["info", "check-llm", "classify"],
        help="Operation to execute.",
    )
    parser.add_argument("--subject", default="", help="Subject of the email.")
    parser.add_argument(
        "--body",
        default=None,
        help="Body of the email; read from stdin when omitted.",
    )
    parser.add_argument("--sender", default="", help="Sender, e.g. 'Jane <j@x.io>'.")
    parser.add_argument(
        "--no-llm",
        dest="use_llm",
        action="store_false",
        help="Skip the LLM and use keyword rules only.",
    )
    return parser


def execute(args: argparse.Namespace, settings: AppSettings) -> int:
    """Execute the requested CLI command and return an exit status."""
    command = args.command
    if command == "info":
        print("Inbox Triage is ready.")
        print(f"LLM enabled: {settings.llm.enabled}")
        print(f"LLM endpoint: {settings.llm.base_url} ({settings.llm.model})")
        return 0
    if command == "check-llm":
        client = OllamaClient(settings.llm)
        if client.is_available():
            print(f"{client.provider_id} is reachable.")
            return 0
        print(f"{client.provider_id} is not reachable; keyword rules will be used.")
        return 1
    if command == "classify":
        body = args.body if args.body is not None else sys.stdin.read()
        email = EmailInput.of(args.subject, body, args.sender)
        result = _run_classify(settings, email, use_llm=args.use_llm)
        print(json.dumps(_serialize(result), indent=2))
        return 0
    return 2


def main() -> None:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args()

    settings = load_app_settings(env_file=args.env_file)
    configure_logging(settings.logging)
    raise SystemExit(execute(args, settings))


def _run_classify(
    settings: AppSettings, email: EmailInput, *, use_llm: bool
) -> TriageResult:
    llm_settings = settings.llm
    if not use_llm:
        llm_settings = llm_settings.model_copy(update={"enabled": False})
    service = build_triage_service(llm_settings)
    return service.triage(email)


def _serialize(result: TriageResult) -> dict[str, object]:
    payload = asdict(result)
    if result.draft is not None:
        payload["draft"]["tone"] = result.draft.tone.value
        payload["draft"]["intent"] = result.draft.intent.value
    return payload


if __name__ == "__main__":
    main()
