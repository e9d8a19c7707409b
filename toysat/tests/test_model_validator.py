# coding: utf-8
"""
For testing the standalone model validator and the formula generator
"""
from toysat.tests import TestCase, main
from toysat.tests.grammar_gene import gen_formula, gen_literal_names
from toysat.tests.model_validator import check_model, parse_model
from toysat.bool.sat.checker import check_formula
from toysat.bool.sat.tokenizer import tokenize
from toysat.utils.types import SolverResult


class TestModelValidator(TestCase):

    def test_parse_model(self):
        self.assertEqual(parse_model("Satisfied with a=True b=False\n"),
                         {"a": True, "b": False})
        self.assertEqual(parse_model("x=False"), {"x": False})
        with self.assertRaises(ValueError):
            parse_model("a=maybe")

    def test_check_model(self):
        self.assertEqual(check_model("a & ~b", {"a": True, "b": False}), "SAT")
        self.assertEqual(check_model("a & ~b", {"a": True, "b": True}), "UNSAT")
        # missing literals read as False
        self.assertEqual(check_model("a | b", {"b": True}), "SAT")

    def test_check_model_rejects_bad_formula(self):
        with self.assertRaises(ValueError):
            check_model("a &", {"a": True})

    def test_reported_models_validate(self):
        for seed in range(20):
            text = gen_formula(4, 2, seed)
            report = check_formula(text)
            if report.status is SolverResult.SAT:
                model = parse_model(str(report.result))
                self.assertEqual(check_model(text, model), "SAT", text)


class TestGrammarGene(TestCase):

    def test_literal_names(self):
        self.assertEqual(gen_literal_names(3), ["a", "b", "c"])
        self.assertEqual(gen_literal_names(28)[26:], ["a1", "b1"])

    def test_formulas_are_reproducible_and_well_formed(self):
        for seed in range(20):
            text = gen_formula(6, 3, seed)
            self.assertEqual(text, gen_formula(6, 3, seed))
            self.assertNotEqual(check_formula(text).status, SolverResult.ERROR, text)
            names = {tok.text for tok in tokenize(text) if tok.is_literal()}
            self.assertTrue(names <= set(gen_literal_names(6)))


if __name__ == '__main__':
    main()
