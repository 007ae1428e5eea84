from gcd_engine import config, Logger
from gcd_engine import gcd_euclidean, gcd_stein, timed_gcd_euclidean, timed_gcd_stein, reduce
from gcd_engine import InvalidArgument, OutOfRange


if __name__ == '__main__':
    config.configure(
        engine={
            'STRICT_ZERO_CHECK': True,          # look at every operand before declaring the GCD undefined
            'WARN_ON_TRUNCATED_FOLD': True      # tell when a zero operand stops the fold
        },
        logging={
            'PROFILE_SUMMARY': True             # collect timings of timed calls for the summary below
        }
    )

    Logger(f'gcd_euclidean(12, 18) = {gcd_euclidean(12, 18)}', Logger.Levels.info).log()
    Logger(f'gcd_stein(12, 18, 24) = {gcd_stein(12, 18, 24)}', Logger.Levels.info).log()
    Logger(f'gcd_euclidean(100, 75, 0, 10) = {gcd_euclidean(100, 75, 0, 10)}', Logger.Levels.info).log()

    for operands in [(1071, 462), (2 ** 31 - 1, 2 ** 30), (840, 3600, 1512, 2520)]:
        res, elapsed = timed_gcd_euclidean(*operands)
        Logger(f'Euclidean {operands} -> {res} in {elapsed:.6f} seconds', Logger.Levels.message).log()
        res, elapsed = timed_gcd_stein(*operands)
        Logger(f'Stein {operands} -> {res} in {elapsed:.6f} seconds', Logger.Levels.message).log()

    for operands in [(0, 0), (-2 ** 31, 5)]:
        try:
            reduce(operands)
        except (InvalidArgument, OutOfRange) as e:
            Logger(f'{operands}: {e.__class__.__name__}: {e}', Logger.Levels.exception).log()

    Logger.timer_summary()
