from __future__ import annotations

import logging
import sys
from typing import Literal

from eta import LispValue
from eta.builtin.env_builtin import register
from eta.config import get_prelude_path, get_recursion_limit
from eta.evaluation.evaluator import evaluate_all
from eta.reader.parser import read
from eta.types.environment import Environment
from eta.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates Eta source against one root Environment.
    Definitions persist across calls to `eval`.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = None):
        limit = get_recursion_limit()
        if limit is not None and limit > sys.getrecursionlimit():
            logger.debug("Raising recursion limit to %d", limit)
            sys.setrecursionlimit(limit)

        self.env: Environment = Environment()
        register(self.env)

        if prelude == 'auto':
            path = get_prelude_path()
            if path is not None:
                logger.debug("Loading prelude from %s", path)
                self.eval(path.read_text(encoding="utf-8"))
        elif prelude:
            self.eval(prelude)

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code` in order; return the last value, or nil."""
        exprs = read(code)
        if not exprs:
            return Nil
        return evaluate_all(exprs, self.env)
