#!/usr/bin/env python3
"""
Interactive CLI demo for Document Chat Service.

Chats through the same orchestrator as the HTTP endpoint.
Load a PDF with ``/load path/to/file.pdf``.
"""
import shutil
import sys
import tempfile
import uuid

from docchat import DocChatApp, UploadedFile, load_config_from_env
from docchat.extraction import PDF_MEDIA_TYPE


def print_banner(session_id):
    """Print welcome banner."""
    print("\n" + "=" * 60)
    print("  Document Chat Service - Interactive CLI Demo")
    print("=" * 60)
    print(f"\nSession: {session_id}")
    print("  /load <pdf path>   attach a document (text after the path is sent as a question)")
    print("  quit | exit        end the session")
    print("-" * 60 + "\n")


def parse_load(line):
    """Split '/load path [question]' into (UploadedFile, question)."""
    parts = line.split(maxsplit=2)
    if len(parts) < 2:
        return None, ""
    # The orchestrator deletes uploads afterwards, so hand it a copy.
    with tempfile.NamedTemporaryFile(delete=False, suffix=".pdf") as tmp:
        with open(parts[1], "rb") as src:
            shutil.copyfileobj(src, tmp)
    upload = UploadedFile(path=tmp.name, media_type=PDF_MEDIA_TYPE, filename=parts[1])
    return upload, parts[2] if len(parts) > 2 else ""


def main():
    """Main CLI loop."""
    session_id = str(uuid.uuid4())
    print_banner(session_id)

    try:
        app = DocChatApp(load_config_from_env())
        app.initialize()
    except Exception as e:
        print(f"\nFailed to initialize service: {e}")
        print("Please check your environment variables and configuration.")
        return 1

    try:
        while True:
            try:
                line = input("You: ").strip()
            except (KeyboardInterrupt, EOFError):
                print("\nGoodbye!\n")
                break

            if line.lower() in ("quit", "exit", "q"):
                print("\nGoodbye!\n")
                break

            upload = None
            message = line
            if line.startswith("/load"):
                try:
                    upload, message = parse_load(line)
                except OSError as e:
                    print(f"Cannot open file: {e}")
                    continue
                if upload is None:
                    print("Usage: /load <pdf path> [question]")
                    continue

            reply = app.chat(message, session_id=session_id, upload=upload)
            print(f"Assistant: {reply.reply}")
            print("-" * 60)
    finally:
        app.shutdown()

    return 0


if __name__ == "__main__":
    sys.exit(main())
