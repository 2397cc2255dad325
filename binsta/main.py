# main.py
import argparse
import json
import logging
import mimetypes
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel

from .client import Client, create_client
from .config import Settings, get_settings
from .exceptions import ApiError
from .storage.dto import ROOT_FOLDER_ID
from .uploads import StreamBody


def setup_logging(settings: Settings):
    """Configures logging to console and, if LOG_FILE is set, to a file."""
    root_logger = logging.getLogger()
    root_logger.setLevel(settings.LOG_LEVEL)

    # Clear any existing handlers to prevent duplicate logs on re-runs or implicit configs
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # Logs go to stderr so that stdout carries only command output
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    if settings.LOG_FILE:
        try:
            file_handler = logging.FileHandler(settings.LOG_FILE)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.error(f"Failed to set up file logging to {settings.LOG_FILE}: {e}")

    # Reducing "noise" from third-party libraries
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="binsta", description="Command-line client for the Binsta file storage API."
    )
    parser.add_argument("--token", help="Bearer token (defaults to BINSTA_TOKEN).")
    parser.add_argument("--api-url", help="API base URL (defaults to BINSTA_API_URL).")
    commands = parser.add_subparsers(dest="command", required=True)

    file_parser = commands.add_parser("file", help="Work with file records.")
    file_commands = file_parser.add_subparsers(dest="action", required=True)
    file_get = file_commands.add_parser("get", help="Show a file's metadata.")
    file_get.add_argument("id")
    file_create = file_commands.add_parser("create", help="Create an empty file record.")
    file_create.add_argument("--name")
    file_create.add_argument("--folder", dest="folder_id")

    folder_parser = commands.add_parser("folder", help="Work with folders.")
    folder_commands = folder_parser.add_subparsers(dest="action", required=True)
    folder_get = folder_commands.add_parser("get", help="Show a folder and its children.")
    folder_get.add_argument("id", nargs="?", default=ROOT_FOLDER_ID)
    folder_create = folder_commands.add_parser("create", help="Create a folder.")
    folder_create.add_argument("--name")
    folder_create.add_argument("--folder", dest="folder_id")

    upload = commands.add_parser("upload", help="Upload a local file.")
    upload.add_argument("path", type=Path)
    upload.add_argument("--name", help="Remote name (defaults to the local file name).")
    upload.add_argument("--folder", dest="folder_id")
    upload.add_argument("--content-type")

    variant = commands.add_parser("variant-url", help="Print the URL of a transformed file.")
    variant.add_argument("id")
    variant.add_argument("--format")
    variant.add_argument("--size")
    variant.add_argument("--quality")

    return parser


def upload_file(
    client: Client,
    path: Path,
    name: Optional[str] = None,
    folder_id: Optional[str] = None,
    content_type: Optional[str] = None,
):
    """Creates a file record, mints a signed URL and streams the local file to it."""
    content_type = (
        content_type or mimetypes.guess_type(path.name)[0] or "application/octet-stream"
    )
    with open(path, "rb") as f:
        file = client.files.create(name=name or path.name, folder_id=folder_id)
        signed_url = client.files.create_signed_upload_url(file.id)
        client.files.upload(signed_url, StreamBody(stream=f, content_type=content_type))
    logging.info(f"Uploaded {path} as file '{file.id}'.")
    return file


def run_command(client: Client, args: argparse.Namespace):
    if args.command == "file" and args.action == "get":
        return client.files.get(args.id)
    if args.command == "file" and args.action == "create":
        return client.files.create(name=args.name, folder_id=args.folder_id)
    if args.command == "folder" and args.action == "get":
        return client.folders.get(args.id)
    if args.command == "folder" and args.action == "create":
        return client.folders.create(name=args.name, folder_id=args.folder_id)
    if args.command == "upload":
        return upload_file(
            client, args.path, args.name, args.folder_id, args.content_type
        )
    if args.command == "variant-url":
        return client.files.get_variant_url(
            args.id,
            {"format": args.format, "size": args.size, "quality": args.quality},
        )
    raise ValueError(f"Unknown command: {args.command}")


def _print_result(result):
    if isinstance(result, BaseModel):
        print(result.model_dump_json(indent=2, by_alias=True))
    elif isinstance(result, str):
        print(result)
    else:
        print(json.dumps(result, indent=2))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(settings)

    client = create_client(
        token=args.token or settings.BINSTA_TOKEN,
        api_url=args.api_url,
        settings=settings,
    )
    with client:
        try:
            result = run_command(client, args)
        except ApiError as e:
            logging.error(f"{e.kind.value}: {e}")
            return 1
        except OSError as e:
            logging.error(f"Could not read local file: {e}")
            return 1
    _print_result(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
