"""
Tokenizer behavioral tests.

Scope
- Long flags with inline and spaced values, boolean presence.
- Short flags, bundles, inline values on bundles.
- Commands, lone dashes, ordering and determinism.

Conventions
- Test method names follow CamelCase per project convention.
"""
import unittest
from unittest import TestCase

from pennant import Flag, Command, tokenize


class TestLongFlags(TestCase):
    def testInlineValue(self):
        self.assertEqual(tokenize(["--port=9090"]), (Flag("port", "9090"),))

    def testInlineValueSplitsOnFirstEquals(self):
        self.assertEqual(tokenize(["--define=a=b"]), (Flag("define", "a=b"),))

    def testEmptyInlineValue(self):
        self.assertEqual(tokenize(["--name="]), (Flag("name", ""),))

    def testSpacedValue(self):
        self.assertEqual(tokenize(["--port", "9090"]), (Flag("port", "9090"),))

    def testPresenceIsTrue(self):
        self.assertEqual(tokenize(["--verbose"]), (Flag("verbose", True),))

    def testFollowedByFlagStaysBoolean(self):
        self.assertEqual(
            tokenize(["--verbose", "--port=1"]),
            (Flag("verbose", True), Flag("port", "1")),
        )

    def testFollowedByShortFlagStaysBoolean(self):
        self.assertEqual(
            tokenize(["--verbose", "-x", "value"]),
            (Flag("verbose", True), Flag("x", "value")),
        )

    def testLiteralBooleanTextIsKept(self):
        self.assertEqual(tokenize(["--debug=false"]), (Flag("debug", "false"),))
        self.assertEqual(tokenize(["--debug", "true"]), (Flag("debug", "true"),))

    def testCasingIsPreserved(self):
        self.assertEqual(tokenize(["--Port=1"]), (Flag("Port", "1"),))


class TestShortFlags(TestCase):
    def testSingleWithSpacedValue(self):
        self.assertEqual(tokenize(["-p", "9090"]), (Flag("p", "9090"),))

    def testSingleWithInlineValue(self):
        self.assertEqual(tokenize(["-p=9090"]), (Flag("p", "9090"),))

    def testBundleIsIndependentBooleans(self):
        self.assertEqual(
            tokenize(["-xyz"]),
            (Flag("x", True), Flag("y", True), Flag("z", True)),
        )

    def testBundleLastCharacterTakesValue(self):
        self.assertEqual(
            tokenize(["-vp", "9090"]),
            (Flag("v", True), Flag("p", "9090")),
        )

    def testBundleWithInlineValueKeepsFirstCharacter(self):
        self.assertEqual(tokenize(["-abc=value"]), (Flag("a", "value"),))

    def testBundleFollowedByFlag(self):
        self.assertEqual(
            tokenize(["-ab", "--c"]),
            (Flag("a", True), Flag("b", True), Flag("c", True)),
        )


class TestCommands(TestCase):
    def testBareItemsAreCommands(self):
        self.assertEqual(tokenize(["build", "fast"]), (Command("build"), Command("fast")))

    def testFlagAfterCommand(self):
        self.assertEqual(
            tokenize(["build", "--verbose"]),
            (Command("build"), Flag("verbose", True)),
        )

    def testLoneDashIsCommand(self):
        self.assertEqual(tokenize(["-"]), (Command("-"),))

    def testLoneDoubleDashIsSkipped(self):
        self.assertEqual(tokenize(["--"]), ())
        self.assertEqual(tokenize(["a", "--", "b"]), (Command("a"), Command("b")))

    def testEmptyInput(self):
        self.assertEqual(tokenize([]), ())


class TestTokenizeContract(TestCase):
    def testOrderIsPreserved(self):
        tokens = tokenize(["run", "--port=1", "-v", "--name", "x", "tail"])
        self.assertEqual(tokens, (
            Command("run"),
            Flag("port", "1"),
            Flag("v", True),
            Flag("name", "x"),
            Command("tail"),
        ))

    def testDeterministic(self):
        argv = ["--a", "b", "-cd", "--e=f", "g", "-", "--"]
        self.assertEqual(tokenize(argv), tokenize(list(argv)))

    def testTokensAreImmutable(self):
        token, = tokenize(["--port=1"])
        with self.assertRaises(AttributeError):
            token.value = "2"

    def testAcceptsGenerators(self):
        self.assertEqual(tokenize(item for item in ["--a"]), (Flag("a", True),))

    def testRejectsPlainString(self):
        with self.assertRaises(TypeError):
            tokenize("--port=1")

    def testRejectsNonStringItems(self):
        with self.assertRaises(TypeError):
            tokenize(["--port", 1])


if __name__ == "__main__":
    unittest.main()
