"""Main entry point for the wiki export modeler."""

import argparse
import logging
import sys
from pathlib import Path

from .config.loader import load_config
from .agent.modeler_agent import EmptyDirectoryError, ModelerAgent, PipelineStage
from .tools.tag_tool import TaggerUnavailableError

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Train pronoun term models from Wikipedia Special:Export files"
    )
    parser.add_argument(
        "-c",
        "--config",
        default="config/config.yaml",
        help="Path to config file (YAML or JSON)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--classify",
        metavar="TAGGED_FILE",
        help="Score a tagged text file against the trained models instead of training",
    )
    args = parser.parse_args(argv)

    # Resolve paths relative to project root
    project_root = Path(__file__).resolve().parent.parent.parent
    config_path = Path(args.config)
    if not config_path.is_absolute():
        config_path = project_root / config_path

    if not config_path.exists():
        print(f"Config not found: {config_path}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    config = load_config(config_path)
    config.paths.resolve(project_root)
    agent = ModelerAgent(config)

    if args.classify:
        try:
            scores = agent.classify_tagged_file(args.classify)
        except OSError as e:
            print(f"Cannot read tagged file {args.classify}: {e}", file=sys.stderr)
            return 1
        if not scores:
            print(f"No models found in {config.paths.model_files_dir}", file=sys.stderr)
            return 1
        for category, score in scores:
            print(f"{category}\t{score:.6g}")
        return 0

    try:
        models = agent.run()
    except EmptyDirectoryError as e:
        logger.error("FATAL: %s", e)
        return e.stage.exit_code
    except TaggerUnavailableError as e:
        logger.error("FATAL: %s", e)
        return PipelineStage.TAG.exit_code

    print(f"Trained {len(models)} models. Saved to {config.paths.model_files_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
