import argparse

from mcQuadrature.compare_integrators import compare_integrators
from mcQuadrature.example_problems import QuarterCircle
from mcQuadrature.integrators import CrudeMcIntegrator, ISIntegrator
from mcQuadrature.proposals import Proposal


def positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f'must be a positive integer, got {value}')
    return n


# Set up argument parser
parser = argparse.ArgumentParser(description="Compare crude Monte Carlo and importance sampling on int_0^1 4 sqrt(1 - x^2) dx = pi.")
parser.add_argument('--samples', type=positive_int, default=10_000, help='number of samples per estimate (default: 10_000)')
parser.add_argument('--seed', type=int, default=None, help='seed for reproducibility (default: OS entropy)')
parser.add_argument('--slope', type=float, default=0.5, help='slope a of the proposal g(x) = (1 - a x) / (1 - a / 2), in [0, 1] (default: 0.5)')
parser.add_argument('--n_repeat', type=positive_int, default=1, help='number of repetitions averaged for each estimator (default: 1)')
parser.add_argument('--output_file', type=str, default=None, help='save the comparison as CSV (default: not saved)')


if __name__ == '__main__':
    args = parser.parse_args()

    # independent streams for the two estimators
    is_seed = None if args.seed is None else args.seed + 1

    crude = CrudeMcIntegrator(seed=args.seed)
    crude.name = 'Crude'

    proposal = Proposal.linear(slope=args.slope, seed=is_seed)
    importance = ISIntegrator.from_proposal(proposal)
    importance.name = 'Importance'

    compare_integrators([crude, importance], QuarterCircle(),
                        n=args.samples, n_repeat=args.n_repeat,
                        output_file=args.output_file)
