from CramerLab.linear_system.solvers import cramer
from CramerLab.linear_system.test_0 import DOCUMENTED_EXAMPLE


def main():
    outcome = cramer(DOCUMENTED_EXAMPLE, raw=True)

    print(f'solution={outcome.result}')
    print(f'solved={outcome.solved}')


if __name__ == "__main__":
    main()
