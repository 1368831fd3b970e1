"""
Replay a recorded accelerometer stream through the step pipeline.
"""
import logging
from pathlib import Path
from .core.config import PipelineConfig, REDUCERS, SMOOTHING_STAGES, THRESH_INIT_VALUE
from .core.pipeline import StepPipeline
from .data.data_loader import DataLoader
from .utils import setup_logging

logger = logging.getLogger("StepPipeline.main")

def process_recording(input_path: str, config: PipelineConfig = None, plot_path: str = None) -> list:
    """
    Process a recording sample by sample.

    Args:
        input_path: CSV file with timestamp and x/y/z columns
        config: Pipeline parameters (defaults if None)
        plot_path: Optional path to save a chart of the processed signal

    Returns:
        List of StepResult, one per accepted sample
    """
    pipeline = StepPipeline(config)
    pipeline.init_kalman()

    data_loader = DataLoader(str(Path(input_path).parent))
    samples = data_loader.load_samples(Path(input_path).name)

    graph = None
    if plot_path:
        from .plotting.graph import SignalGraph
        graph = SignalGraph(resolution=max(len(samples), 1))

    results = []
    step_indices = []
    for i, sample in enumerate(samples):
        result = pipeline.process(sample)
        if result is None:
            continue
        results.append(result)
        if result.step:
            step_indices.append(i)
        if graph is not None:
            graph.add_new_point(i, [result.value])

    n_steps = sum(r.step for r in results)
    logger.info(f"Processed {len(results)} of {len(samples)} samples, {n_steps} steps")

    if graph is not None:
        graph.render(plot_path, steps=step_indices)
        logger.info(f"Saved plot to {plot_path}")

    return results

def main(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description='Accelerometer Step Pipeline')
    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    process_parser = subparsers.add_parser('process', help='Detect steps in a recording')
    process_parser.add_argument('--input', required=True, help='Input accelerometer CSV file')
    process_parser.add_argument('--threshold', type=float, default=THRESH_INIT_VALUE,
                                help='Step detection threshold')
    process_parser.add_argument('--reducer', choices=REDUCERS, default='linear_magnitude',
                                help='Scalar reduction of each sample')
    process_parser.add_argument('--smoothing', nargs='*', choices=SMOOTHING_STAGES, default=['kalman'],
                                help='Smoothing stages, applied in the given order')
    process_parser.add_argument('--plot', default=None, help='Save a chart of the signal to this path')
    process_parser.add_argument('--log-file', default=None, help='Also log to this file')
    process_parser.add_argument('--verbose', action='store_true', help='Debug logging')

    args = parser.parse_args(argv)

    if args.command == 'process':
        setup_logging(args.log_file, logging.DEBUG if args.verbose else logging.INFO)
        config = PipelineConfig(
            threshold=args.threshold,
            reducer=args.reducer,
            smoothing=tuple(args.smoothing)
        )
        results = process_recording(args.input, config, args.plot)
        steps = [r for r in results if r.step]
        print(f"\nDetected {len(steps)} steps:")
        for i, r in enumerate(steps, 1):
            print(f"Step {i}: t = {r.timestamp / 1e9:.3f} s, value = {r.value:.2f}")
    else:
        parser.print_help()

if __name__ == '__main__':
    main()
