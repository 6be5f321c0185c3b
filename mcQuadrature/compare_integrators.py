from .example_problems import Problem
from .integrators import Integrator
from .utils import handle_n

import time, csv

import numpy as np
from typing import List, Optional


FIELDNAMES = [
    'integrator', 'problem', 'true_value', 'estimate', 'estimate_std',
    'error', 'n_evals', 'time_taken']


def format_table(rows: List[dict], method_width: int = 15,
                 estimate_width: int = 20) -> str:
    """
    Render comparison rows as a fixed width table
    with columns Method | Estimate | Error,
    one row per integrator in the order given.

    Parameters
    ----------
    rows : List[dict]
        each with keys 'integrator', 'estimate' and 'error'
    method_width, estimate_width : int
        widths of the first two columns

    Returns
    -------
    str
        the table, one line per row after the header and rule
    """
    header = (f"{'Method':<{method_width}}|"
              f"{'Estimate':<{estimate_width}}|Error")
    lines = [header, '=' * max(len(header), method_width + estimate_width + 18)]
    for row in rows:
        lines.append(f"{row['integrator']:<{method_width}}|"
                     f"{row['estimate']:<{estimate_width}.10g}|"
                     f"{row['error']:.6e}")
    return '\n'.join(lines)


def write_results(output_file: str, results: List[dict],
                  fieldnames: List[str] = FIELDNAMES, mode: str = 'w'):
    with open(output_file, mode=mode, newline='') as file:
        writer = csv.DictWriter(file, fieldnames=fieldnames)
        writer.writeheader()
        for result in results:
            writer.writerow(result)


def compare_integrators(integrators: List[Integrator], problem: Problem,
                        n: int, n_repeat: int = 1, verbose: int = 1,
                        output_file: Optional[str] = None) -> List[dict]:
    """
    Compare different integrators on a given problem.
    Give integrators attribute `name`
    for clear outputs.

    For each integrator, the estimate (averaged over repeats) is
    compared with problem.answer by its absolute error.

    Parameters
    ----------
    integrators : List[Integrator]
        A list of integrator instances to be compared.
    problem : Problem
        The problem instance containing the integrand and true answer.
    n : int
        number of samples drawn by each integrator in each run
    n_repeat : int, optional
        Number of times to repeat the integration and average the results.
        Default is 1.
    verbose : int, optional
        If 0, print nothing;
        if 1, print the runs and the final table.
        Default is 1.
    output_file : str, optional
        if given, the rows are also saved there as CSV

    Returns
    -------
    List[dict]
        one row per integrator, in the order of ``integrators``,
        with the keys in FIELDNAMES
    """
    n = handle_n(n)
    n_repeat = handle_n(n_repeat)

    rows = []
    for i, integrator in enumerate(integrators):
        integrator_name = getattr(integrator, 'name', f'integrator[{i}]')

        if verbose >= 1:
            print(f'Testing {integrator_name} on {problem}')

        estimates = []
        times = []
        for _ in range(n_repeat):
            start_time = time.time()
            result = integrator(problem, n, return_N=True)
            times.append(time.time() - start_time)
            estimates.append(result['estimate'])

        avg_estimate = float(np.mean(estimates))
        rows.append({
            'integrator': integrator_name,
            'problem': str(problem),
            'true_value': problem.answer,
            'estimate': avg_estimate,
            'estimate_std': float(np.std(estimates)),
            'error': abs(avg_estimate - problem.answer),
            'n_evals': n * n_repeat,
            'time_taken': float(np.mean(times)),
        })

    if verbose >= 1:
        print(f'True answer of {problem}: {problem.answer}')
        print(format_table(rows))

    if output_file is not None:
        write_results(output_file, rows)
        if verbose >= 1:
            print(f'Results saved to {output_file}')

    return rows
