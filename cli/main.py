from __future__ import annotations

import argparse
import asyncio
from typing import Sequence

from app import REPO_URL_PLACEHOLDER, JobBoardFacade
from domain.models import BootstrapFailed, SubmissionStatus
from domain.ports import UserInteractionPort
from domain.services import JobBoard, SubmissionController
from infra.config import ConfigError, FileSystemConfigProvider
from infra.http import UrllibJobBoardApiClient
from infra.interaction import ConsoleUserInteraction
from infra.runtime import StructuredLogger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="job-board")
    parser.add_argument("--config-dir", default="./config", help="Path to config folder")
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Socket timeout in seconds for each HTTP request (default: none)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("check-config", help="Validate config.json and exit")
    sub.add_parser("list-jobs", help="Load the candidate and print open positions")

    apply_p = sub.add_parser("apply", help="Submit a repository URL for one position")
    apply_p.add_argument("job_id")
    apply_p.add_argument("repo_url")

    sub.add_parser("interactive", help="Prompt for a repository URL per position")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config_provider = FileSystemConfigProvider(args.config_dir)

    errors = config_provider.validate()
    if errors:
        print("Config validation failed:")
        for err in errors:
            print(f"  - {err}")
        return 1

    if args.command == "check-config":
        print(f"Config OK: {config_provider.config_path}")
        return 0

    try:
        cfg = config_provider.get_config()
    except ConfigError as exc:
        print(f"Config error: {exc}")
        return 1

    logger = StructuredLogger(component="job-board")
    api = UrllibJobBoardApiClient(base_url=cfg.base_url, timeout=args.timeout)
    board = JobBoard(api=api, email=cfg.user_email, logger=logger)

    if args.command == "list-jobs":
        return asyncio.run(_handle_list(board))
    if args.command == "apply":
        return asyncio.run(_handle_apply(board, args.job_id, args.repo_url))
    if args.command == "interactive":
        return asyncio.run(_handle_interactive(board, ConsoleUserInteraction()))

    raise SystemExit(f"Unsupported command: {args.command}")


async def _load(board: JobBoard) -> bool:
    facade = JobBoardFacade(board)
    print(facade.view().status_text)
    state = await board.load()
    if isinstance(state, BootstrapFailed):
        print(f"Error: {state.message}")
        return False
    view = facade.view()
    print(view.heading)
    print(view.greeting)
    return True


async def _handle_list(board: JobBoard) -> int:
    if not await _load(board):
        return 1
    for card in JobBoardFacade(board).view().cards:
        print(f"{card.job_id} | {card.title}")
    return 0


async def _handle_apply(board: JobBoard, job_id: str, repo_url: str) -> int:
    if not await _load(board):
        return 1
    try:
        controller = board.controller(job_id)
    except KeyError:
        print(f"Unknown job id: {job_id}")
        return 2
    controller.set_repo_url(repo_url)
    state = await controller.submit()
    _print_card(controller)
    return 0 if state.status is SubmissionStatus.SUCCESS else 1


async def _handle_interactive(board: JobBoard, ui: UserInteractionPort) -> int:
    if not await _load(board):
        return 1
    for controller in board.controllers:
        await _prompt_until_settled(controller, ui)
    submitted = sum(1 for c in board.controllers if c.state.status is SubmissionStatus.SUCCESS)
    await ui.send_info(f"{submitted}/{len(board.controllers)} applications sent.")
    return 0


async def _prompt_until_settled(controller: SubmissionController, ui: UserInteractionPort) -> None:
    """Ask for a repo URL until the posting succeeds or the user leaves it blank."""
    prompt = f"{controller.job.title} - repo URL, e.g. {REPO_URL_PLACEHOLDER} (blank to skip):"
    while controller.state.status is not SubmissionStatus.SUCCESS:
        response = await ui.ask_free_text(controller.job.id, prompt)
        if not response.text.strip():
            return
        controller.set_repo_url(response.text)
        await controller.submit()
        card = JobBoardFacade.card(controller)
        if card.error_message:
            await ui.send_info(card.error_message)
        else:
            await ui.send_info(card.button_label)


def _print_card(controller: SubmissionController) -> None:
    card = JobBoardFacade.card(controller)
    print(f"{card.title}: {card.button_label}")
    if card.error_message:
        print(card.error_message)


if __name__ == "__main__":
    raise SystemExit(main())
