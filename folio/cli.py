import argparse
import logging
import sys
from typing import List, Optional

from folio import dependencies as deps
from folio.exceptions import PostsError
from folio.services.renderer import format_date, render_markdown

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="folio", description="Inspect a directory of markdown posts"
    )
    parser.add_argument("--posts-dir", help="posts directory (default: POSTS_DIR)")
    parser.add_argument("--log-level", help="logging level (default: LOG_LEVEL)")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("ids", help="list post ids")
    list_cmd = commands.add_parser("list", help="list posts, newest first")
    list_cmd.add_argument("--tag", help="only posts carrying this tag")
    show_cmd = commands.add_parser("show", help="show a single post")
    show_cmd.add_argument("post_id")
    show_cmd.add_argument("--html", action="store_true", help="render body to HTML")
    commands.add_parser("tags", help="list every tag in use")
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run(args: argparse.Namespace) -> None:
    service = deps.get_posts_service(deps.get_settings(), posts_dir=args.posts_dir)

    if args.command == "ids":
        for post_id in service.list_post_ids():
            print(post_id)
    elif args.command == "list":
        for post in service.get_sorted_posts(args.tag):
            line = f"{post.date.isoformat()}  {post.id}  {post.title}"
            print(f"{line}  [{', '.join(post.tags)}]")
    elif args.command == "show":
        post = service.get_post(args.post_id)
        print(post.title)
        print(format_date(post.date))
        print(", ".join(post.tags))
        print()
        print(render_markdown(post.content) if args.html else post.content)
    elif args.command == "tags":
        for tag in service.list_tags():
            print(tag)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level or deps.get_settings().LOG_LEVEL)

    try:
        run(args)
    except PostsError as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
