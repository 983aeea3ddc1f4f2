#!/usr/bin/env python3
"""Minimal component-wise boosting loop monitored by boostmon - runs in seconds.

Each iteration fits one least-squares slope per feature on the residuals,
keeps the best one and shrinks it by the learning rate. The loggers track
in-bag and out-of-bag risk and stop training once the held-out risk stops
improving.
"""

import argparse

import numpy as np

import boostmon as bm


class SlopeLearner:
    """Base learner ``slope * x`` on a single feature."""

    def __init__(self, data_identifier: str, slope: float):
        self.data_identifier = data_identifier
        self.slope = slope

    def predict(self, data):
        return self.slope * np.asarray(data, dtype=np.float64)


def squared_error(response, prediction):
    return (response - prediction) ** 2


def select_learner(features, residuals):
    best, best_sse = None, np.inf
    for name, x in features.items():
        slope = float(x @ residuals / (x @ x))
        sse = float(np.sum((residuals - slope * x) ** 2))
        if sse < best_sse:
            best, best_sse = SlopeLearner(name, slope), sse
    return best


def make_data(n: int, seed: int):
    rng = np.random.default_rng(seed)
    features = {f"x{j}": rng.normal(size=n) for j in range(1, 6)}
    y = 3.0 + 2.0 * features["x1"] - 1.5 * features["x4"] + rng.normal(scale=0.5, size=n)
    return features, y


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--iterations", type=int, default=2000)
    parser.add_argument("--learning-rate", type=float, default=0.05)
    parser.add_argument("--eps", type=float, default=1e-5)
    parser.add_argument("--trace", type=int, default=100)
    parser.add_argument("--csv", type=str, default=None, help="Write trajectories to this file")
    args = parser.parse_args()

    train_x, train_y = make_data(400, seed=0)
    oob_x, oob_y = make_data(200, seed=1)

    config = bm.MonitorConfig(
        max_iterations=args.iterations,
        eps_for_break=args.eps,
        max_time=5,
        time_unit="minutes",
        trace=args.trace,
    )
    registry = bm.build_registry(
        config, loss=squared_error, held_out_data=oob_x, held_out_response=oob_y
    )
    printer = bm.TracePrinter(registry, trace=config.trace)

    print(f"Stopping rule: {config.describe()}")
    offset = float(np.mean(train_y))
    prediction = np.full_like(train_y, offset)
    printer.print_header()
    for m in range(1, config.max_iterations + 1):
        learner = select_learner(train_x, train_y - prediction)
        prediction = prediction + args.learning_rate * learner.predict(
            train_x[learner.data_identifier]
        )
        registry.log_step(m, train_y, prediction, learner, offset, args.learning_rate)
        printer.print_status(m)
        if registry.stop_criteria_reached():
            printer.print_stop_reason()
            break

    table = registry.collect_logged_data()
    print(f"Trained {table.num_iterations} iterations")
    if args.csv:
        path = bm.CSVExporter(args.csv).write(table)
        print(f"Wrote trajectories to {path}")


if __name__ == "__main__":
    main()
