# coding: utf-8
"""
Z3 as an independent oracle for the backtracking search.
  - Z3Translator: token stream -> z3 Boolean term (same grammar as the evaluator)
  - Z3SATSolver: sat/unsat, models and assumption checks through z3
"""
from typing import Dict, Mapping, Optional, Sequence

import z3

from toysat.bool.sat.evaluator import FormulaWalker
from toysat.bool.sat.stats import SearchStats
from toysat.bool.sat.tokenizer import Token, tokenize
from toysat.utils.types import SolverResult


class Z3Translator(FormulaWalker[z3.BoolRef]):
    """Builds the z3 term of a formula. Raises FormulaSyntaxError like the evaluator."""

    def __init__(self, tokens: Sequence[Token], stats: Optional[SearchStats] = None):
        super().__init__(tokens, stats)
        self.name2z3var: Dict[str, z3.BoolRef] = {}

    def literal(self, tok: Token) -> z3.BoolRef:
        if tok.text not in self.name2z3var:
            self.name2z3var[tok.text] = z3.Bool(tok.text)
        return self.name2z3var[tok.text]

    def negate(self, value: z3.BoolRef) -> z3.BoolRef:
        return z3.Not(value)

    def conjoin(self, left: z3.BoolRef, right: z3.BoolRef) -> z3.BoolRef:
        return z3.And(left, right)

    def disjoin(self, left: z3.BoolRef, right: z3.BoolRef) -> z3.BoolRef:
        return z3.Or(left, right)


class Z3SATSolver:
    """Z3 SAT solver wrapper."""

    def __init__(self, logic="QF_FD"):
        self.name2z3var: Dict[str, z3.BoolRef] = {}  # for reading models back by name
        self.solver = z3.SolverFor(logic)
        self.formula: Optional[z3.BoolRef] = None

    def from_string(self, text: str) -> None:
        """Load a formula from its text."""
        self.from_tokens(tokenize(text))

    def from_tokens(self, tokens: Sequence[Token]) -> None:
        """
        Add the formula `tokens` to self.solver.
        Raises FormulaSyntaxError on malformed input.
        """
        translator = Z3Translator(tokens)
        self.formula = translator.walk()
        self.name2z3var.update(translator.name2z3var)
        self.solver.add(self.formula)

    def get_z3var(self, name: str) -> z3.BoolRef:
        """Given a literal name, return its Z3 Boolean var."""
        if name in self.name2z3var:
            return self.name2z3var[name]
        raise ValueError(f"{name} not in the var list!")

    def check_sat(self) -> SolverResult:
        """Check satisfiability of the loaded formula."""
        res = self.solver.check()
        if res == z3.sat:
            return SolverResult.SAT
        if res == z3.unsat:
            return SolverResult.UNSAT
        return SolverResult.ERROR

    def get_model(self) -> Dict[str, bool]:
        """Literal name -> value of the last model; call after a SAT check."""
        model = self.solver.model()
        return {
            name: z3.is_true(model.eval(var, model_completion=True))
            for name, var in self.name2z3var.items()
        }

    def check_sat_assuming(self, assumptions: Mapping[str, bool]) -> SolverResult:
        """Check satisfiability with the literals in `assumptions` fixed."""
        lits = []
        for name, value in assumptions.items():
            var = self.get_z3var(name)
            lits.append(var if value else z3.Not(var))
        res = self.solver.check(*lits)
        if res == z3.sat:
            return SolverResult.SAT
        if res == z3.unsat:
            return SolverResult.UNSAT
        return SolverResult.ERROR
