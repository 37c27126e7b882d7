"""
polyset CLI - Main entry point.

Provides a command-line interface for running set operations on polygon
files and YAML job descriptions.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from polyset_geometry.config import PolysetConfig
from polyset_geometry.operations import InvalidOperandError, SetOperation, apply_ops
from polyset_geometry.polygon import Polygon
from polyset_io.files import format_polygon, read_polygon, write_polygon
from polyset_io.logging import LogEvent, StructuredLogger, create_logger


def load_yaml_config(config_path: str) -> Dict[str, Any]:
    """
    Load a YAML job file.

    Args:
        config_path: Path to YAML file

    Returns:
        Dictionary with job description

    Raises:
        FileNotFoundError: If job file doesn't exist
        ValueError: If YAML is invalid or not a mapping
    """
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Job file not found: {config_path}")

    try:
        with open(path) as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_path}: {e}")

    if not isinstance(config, dict):
        raise ValueError(f"Job file {config_path} must contain a mapping")
    return config


def load_job_polygon(entry: Any, base_dir: Path, logger: StructuredLogger) -> Polygon:
    """
    Resolve one 'polygons' entry of a job file.

    An entry is either a list of [x, y] pairs or a path to a polygon file
    (relative paths are resolved against the job file's directory).
    """
    if isinstance(entry, str):
        path = Path(entry)
        if not path.is_absolute():
            path = base_dir / path
        return read_polygon(path, logger=logger)

    if isinstance(entry, list):
        return Polygon.from_coordinates(tuple(pair) for pair in entry)

    raise ValueError(f"Polygon entry must be a file path or a list of [x, y] pairs, got {entry!r}")


def resolve_output(path: Optional[str], base_dir: Path) -> Optional[str]:
    """Anchor a relative output path at base_dir. Absolute paths are kept."""
    if not path:
        return None
    path = Path(path)
    if not path.is_absolute():
        path = base_dir / path
    return str(path)


def render_result(
    operands: Sequence[Polygon],
    result: Polygon,
    output_path: Path,
    config: PolysetConfig,
    logger: StructuredLogger,
) -> Path:
    """Draw operands and result and save the image."""
    import cv2

    from polyset_geometry.rendering import PolygonVisualizer

    visualizer = PolygonVisualizer(config=config.render)
    frame, _ = visualizer.render(operands=operands, result=result)

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if not cv2.imwrite(str(output_path), frame):
        raise OSError(f"Failed to write image: {output_path}")

    logger.info(
        event=LogEvent.RENDER_WRITTEN,
        message=f"Render written to file: {output_path}",
        metadata={'path': str(output_path)},
    )
    return output_path


def run_operation(
    operation: SetOperation,
    polygons: List[Polygon],
    config: PolysetConfig,
    logger: StructuredLogger,
    output: Optional[str] = None,
    render: Optional[str] = None,
) -> Polygon:
    """
    Fold the operation over the polygons, print and optionally save the result.

    Raises:
        InvalidOperandError: If an operand is invalid
    """
    try:
        result = apply_ops(polygons, operation, config.geometry)
    except InvalidOperandError as e:
        logger.warning(
            event=LogEvent.OPERATION_INVALID_OPERAND,
            message=str(e),
            metadata={'operation': operation.value, 'operand': e.operand, 'reason': e.reason},
        )
        raise

    logger.info(
        event=LogEvent.OPERATION_COMPLETED,
        message=f"{operation.value} computed",
        metadata={
            'operation': operation.value,
            'operands': len(polygons),
            'points': result.get_number_of_points(),
        },
    )

    print(operation.value)
    print(format_polygon(result))

    if output:
        write_polygon(result, output, logger=logger)
    if render:
        render_result(polygons, result, Path(render), config, logger)

    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polyset-cli",
        description="polyset CLI - Boolean set operations on simple polygons",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Binary operations on polygon files (one "x y" or "x,y" pair per line)
  polyset-cli union square.csv triangle.csv -o output.csv
  polyset-cli intersection square.csv triangle.csv --render intersection.png
  polyset-cli difference square.csv triangle.csv

  # Fold an operation over many polygons
  polyset-cli apply union a.csv b.csv c.csv -o merged.csv

  # Relative -o/--render paths are written under output_dir (default ./runs)
  polyset-cli --config polyset.yaml union a.csv b.csv -o union.csv

  # Run a YAML job
  polyset-cli run jobs/union.yaml
"""
    )

    # Global arguments
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config (geometry/render settings, output_dir)"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Binary operations
    for operation in SetOperation:
        binary = subparsers.add_parser(
            operation.value, help=f'Compute the {operation.value} of two polygon files'
        )
        binary.add_argument('first', help='First polygon file (A)')
        binary.add_argument('second', help='Second polygon file (B)')
        binary.add_argument(
            '-o', '--output', help='Write result to this file (relative paths: under output_dir)'
        )
        binary.add_argument(
            '--render', help='Render operands and result to this image (relative paths: under output_dir)'
        )

    # apply command
    apply = subparsers.add_parser('apply', help='Fold an operation over polygon files')
    apply.add_argument('operation', choices=[op.value for op in SetOperation])
    apply.add_argument('polygons', nargs='+', help='Polygon files, in fold order')
    apply.add_argument(
        '-o', '--output', help='Write result to this file (relative paths: under output_dir)'
    )
    apply.add_argument(
        '--render', help='Render operands and result to this image (relative paths: under output_dir)'
    )

    # run command
    run = subparsers.add_parser('run', help='Run a YAML job file')
    run.add_argument('job', help='Path to job YAML')

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logger = create_logger("cli", level=getattr(logging, args.log_level))

    try:
        if args.config:
            config = PolysetConfig.from_yaml(Path(args.config))
            logger.info(
                event=LogEvent.CONFIG_LOADED,
                message=f"Config loaded: {args.config}",
                metadata={'epsilon': config.geometry.epsilon,
                          'strict_validity': config.geometry.strict_validity},
            )
        else:
            config = PolysetConfig()

        if args.command in [op.value for op in SetOperation]:
            polygons = [
                read_polygon(args.first, logger=logger),
                read_polygon(args.second, logger=logger),
            ]
            run_operation(
                SetOperation(args.command), polygons, config, logger,
                output=resolve_output(args.output, config.output_dir),
                render=resolve_output(args.render, config.output_dir),
            )

        elif args.command == 'apply':
            polygons = [read_polygon(path, logger=logger) for path in args.polygons]
            run_operation(
                SetOperation(args.operation), polygons, config, logger,
                output=resolve_output(args.output, config.output_dir),
                render=resolve_output(args.render, config.output_dir),
            )

        elif args.command == 'run':
            job = load_yaml_config(args.job)
            base_dir = Path(args.job).parent

            if 'operation' not in job or 'polygons' not in job:
                raise ValueError("Job file requires 'operation' and 'polygons'")

            polygons = [load_job_polygon(entry, base_dir, logger) for entry in job['polygons']]

            # Job outputs live next to the job file, not in output_dir
            run_operation(
                SetOperation(job['operation']), polygons, config, logger,
                output=resolve_output(job.get('output'), base_dir),
                render=resolve_output(job.get('render'), base_dir),
            )

    except Exception as e:
        logger.error(
            event=LogEvent.CLI_ERROR,
            message=f"Command '{args.command}' failed",
            exc_info=e,
        )
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
