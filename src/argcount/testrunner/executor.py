"""Run cases against an executable and compare the results.

Each case runs in its own child process. Cases run concurrently on a
thread pool; results come back in the order the cases were given.
"""

import logging
import shlex
import subprocess
import time
from concurrent.futures import ThreadPoolExecutor, as_completed

from tqdm import tqdm

from argcount.core.config import RunnerConfig
from argcount.core.constants import TQDM_BAR_FORMAT
from argcount.testrunner.models import CaseResult, TestCase

logger = logging.getLogger(__name__)


def build_command(executable: str, case: TestCase) -> list[str]:
    """Split the executable and the case arguments into an argv list."""
    return shlex.split(executable) + case.arguments


def describe_command(executable: str, case: TestCase) -> str:
    """Human-readable shell form of the command a case runs."""
    command = executable
    if case.argv:
        command += f" {case.argv}"
    if case.stdin_file is not None:
        command += f" < {case.stdin_file}"
    return command


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def compare_stream(stream_name: str, actual: bytes, expected: bytes) -> str:
    """Return an error block for a mismatching stream, or an empty string."""
    if actual == expected:
        return ""
    return f"There was an error with {stream_name}:\nOutput:\n{_decode(actual)}\nExpected:\n{_decode(expected)}\n"


def run_case(case: TestCase, config: RunnerConfig) -> CaseResult:
    """Execute one case and check its exit status and output streams.

    Timeouts and launch failures produce a failed result rather than
    an exception so that one broken case never aborts the run.
    """
    command = describe_command(config.executable, case)
    argv = build_command(config.executable, case)
    logger.debug(f"[{case.name}] running {argv}")

    start = time.perf_counter()
    try:
        completed = subprocess.run(
            argv,
            input=case.stdin if case.stdin is not None else b"",
            capture_output=True,
            timeout=config.timeout,
            check=False,
        )
    except subprocess.TimeoutExpired:
        logger.warning(f"[{case.name}] timed out after {config.timeout}s")
        return CaseResult(
            case=case,
            command=command,
            passed=False,
            error_message=f"Timed out after {config.timeout:g} seconds\n",
            duration=time.perf_counter() - start,
            mismatches=["timeout"],
        )
    except OSError as e:
        logger.error(f"[{case.name}] could not start {argv[0] if argv else config.executable!r}: {e}")
        return CaseResult(
            case=case,
            command=command,
            passed=False,
            error_message=f"exec error: {e}\n",
            duration=time.perf_counter() - start,
            mismatches=["exec"],
        )
    duration = time.perf_counter() - start

    mismatches = []
    error_message = ""
    if completed.returncode != case.expected_return_code:
        mismatches.append("return_code")
        error_message += (
            f"Unexpected return code {completed.returncode}, expected {case.expected_return_code}\n"
        )

    stdout_error = compare_stream("stdout", completed.stdout, case.expected_stdout)
    if stdout_error:
        mismatches.append("stdout")
        error_message += stdout_error

    stderr_error = compare_stream("stderr", completed.stderr, case.expected_stderr)
    if stderr_error:
        mismatches.append("stderr")
        error_message += stderr_error

    passed = not mismatches
    logger.info(f"[{case.name}] {'passed' if passed else 'failed'} in {duration:.3f}s")

    return CaseResult(
        case=case,
        command=command,
        passed=passed,
        return_code=completed.returncode,
        stdout=completed.stdout,
        stderr=completed.stderr,
        error_message=error_message,
        duration=duration,
        mismatches=mismatches,
    )


def run_cases(cases: list[TestCase], config: RunnerConfig) -> list[CaseResult]:
    """Run all cases concurrently.

    Args:
        cases: Cases to execute
        config: Runner configuration (executable, timeout, workers, quiet)

    Returns:
        One result per case, in the same order as ``cases``
    """
    if not cases:
        return []

    max_workers = max(1, min(config.workers, len(cases)))
    logger.info(f"Running {len(cases)} case(s) with {max_workers} worker(s)")

    results: dict[int, CaseResult] = {}
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        future_to_index = {executor.submit(run_case, case, config): index for index, case in enumerate(cases)}

        with tqdm(
            total=len(cases),
            desc="Running cases",
            unit="case",
            bar_format=TQDM_BAR_FORMAT,
            leave=False,
            disable=config.quiet,
        ) as pbar:
            for future in as_completed(future_to_index):
                index = future_to_index[future]
                result = future.result()
                results[index] = result
                mark = "✓" if result.passed else "✗"
                pbar.set_postfix_str(f"{mark} {result.case.name}", refresh=True)
                pbar.update(1)

    return [results[index] for index in range(len(cases))]
