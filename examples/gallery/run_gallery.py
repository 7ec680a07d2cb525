"""
Print a summary of every catalog model and optionally plot one of them.

Usage:
  python examples/gallery/run_gallery.py
  python examples/gallery/run_gallery.py --plot predatorprey --save pp.png
  python examples/gallery/run_gallery.py --snippet sir
"""

import argparse
import logging

from odegallery import generate_trajectory, list_models
from odegallery.snippets import render_snippet


def main() -> None:
    parser = argparse.ArgumentParser(description="odegallery: ODE model trajectories")
    parser.add_argument("--plot", metavar="MODEL_ID", help="Plot the trajectory of one model")
    parser.add_argument("--save", metavar="PATH", help="Save the plot instead of showing it")
    parser.add_argument("--snippet", metavar="MODEL_ID", help="Print the scipy snippet for one model")
    parser.add_argument("--verbose", action="store_true", help="Debug logging from the engine")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    print(f"{'id':<14}{'kind':<12}{'points':>7}  {'t range':<16}final values")
    for d in list_models():
        traj = generate_trajectory(d.id)
        last = traj[-1]
        finals = ", ".join(f"{k}={last[k]:.3f}" for k in traj.fields)
        t_range = f"[{traj.time.min():g}, {traj.time.max():g}]"
        print(f"{d.id:<14}{d.kind.value:<12}{len(traj):>7}  {t_range:<16}{finals}")

    if args.snippet:
        print()
        print(render_snippet(args.snippet))

    if args.plot:
        import matplotlib.pyplot as plt
        from odegallery.viz import plot_trajectory

        plot_trajectory(args.plot)
        plt.tight_layout()
        if args.save:
            plt.savefig(args.save, dpi=120)
            print(f"Saved {args.save}")
        else:
            plt.show()


if __name__ == "__main__":
    main()
