"""
Train a max-margin binary classifier on the built-in moons dataset.

Example:
    python scripts/train_moons.py --layers 16 16 1 --max-iter 100 --plot regions.png
"""

import argparse
import logging

import numpy as np

from scalargrad import BinaryClassifier, TrainConfig, load_moons


def parse_args():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--layers", type=int, nargs="+", default=[16, 16, 1],
                        help="MLP layer sizes; the last one must be 1")
    parser.add_argument("--max-iter", type=int, default=100)
    parser.add_argument("--target-accuracy", type=float, default=100.0)
    parser.add_argument("--alpha", type=float, default=1e-4, help="L2 regularisation strength")
    parser.add_argument("--n-points", type=int, default=None,
                        help="Train on a random subset of this many points")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--plot", default=None, help="Save the decision regions to this file")
    parser.add_argument("--verbose", action="store_true", help="Log forward/backward passes")
    return parser.parse_args()


def main():
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    X, y = load_moons()
    rng = np.random.default_rng(args.seed)
    model = BinaryClassifier(X, y, args.layers, rng=rng)
    config = TrainConfig(
        max_iter=args.max_iter,
        target_accuracy=args.target_accuracy,
        alpha=args.alpha,
        n_points=args.n_points,
        seed=args.seed,
    )

    history = model.train(config)
    print(history)
    print(f"Model output for x = (0,0): y = {model.decision_function([0.0, 0.0]):.6f}")

    if args.plot:
        import matplotlib
        matplotlib.use("Agg")
        from scalargrad.plotting import plot_decision_regions

        ax = plot_decision_regions(model, X, y)
        ax.figure.savefig(args.plot)
        print(f"Saved decision regions to {args.plot}")


if __name__ == "__main__":
    main()
