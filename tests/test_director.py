import unittest

from detective.director import AT_ROOM, TERMINATED, Director
from detective.ledger import ClueLedger
from detective.listener import Listener
from detective.mansion import ClueCatalog, build_mansion
from detective.narrator import Narrator
from support import ScriptedConsole


def scenario_mansion():
    # root(left=L, right=R); only the root hides a clue.
    mansion = build_mansion({"name": "Hall", "left": {"name": "Library"}, "right": {"name": "Kitchen"}})
    catalog = ClueCatalog({"Hall": "torn letter"})
    return mansion, catalog


def play(commands, mansion=None, catalog=None):
    if mansion is None:
        mansion, catalog = scenario_mansion()
    console = ScriptedConsole(commands)
    director = Director(mansion, catalog)
    ledger = director.run(Listener(console), Narrator(console))
    print("\n--- Game Trace ---")
    print(console.text)
    print("--- End Trace ---")
    return director, ledger, console.text


class TestVisit(unittest.TestCase):
    def setUp(self):
        self.mansion, self.catalog = scenario_mansion()
        self.director = Director(self.mansion, self.catalog)

    def test_starts_at_root(self):
        self.assertIs(self.director.current_room, self.mansion.root)
        self.assertEqual(self.director.state, AT_ROOM)
        self.assertEqual(len(self.director.ledger), 0)

    def test_collects_new_clue(self):
        results = self.director.visit()
        self.assertEqual(results[0], {"event_type": "room_entered", "data": {"room": "Hall"}})
        self.assertEqual(results[1]['event_type'], "clue_collected")
        self.assertEqual(results[1]['data']['clue'], "torn letter")
        self.assertIn("torn letter", self.director.ledger)

    def test_second_visit_does_not_duplicate(self):
        self.director.visit()
        results = self.director.visit()
        self.assertEqual(results[1]['event_type'], "clue_already_collected")
        self.assertEqual(len(self.director.ledger), 1)

    def test_room_without_clue(self):
        self.director.execute('e')
        results = self.director.visit()
        self.assertEqual(results[1], {"event_type": "no_clue", "data": {"room": "Library"}})

    def test_uses_given_ledger(self):
        ledger = ClueLedger(["torn letter"])
        director = Director(self.mansion, self.catalog, ledger)
        self.assertEqual(director.visit()[1]['event_type'], "clue_already_collected")
        self.assertIs(director.ledger, ledger)


class TestExecute(unittest.TestCase):
    def setUp(self):
        self.mansion, self.catalog = scenario_mansion()
        self.director = Director(self.mansion, self.catalog)

    def test_moves_left_and_right(self):
        results = self.director.execute('e')
        self.assertEqual(results[0]['event_type'], "moved")
        self.assertEqual(self.director.current_room.name, "Library")

        director = Director(self.mansion, self.catalog)
        director.execute('d')
        self.assertEqual(director.current_room.name, "Kitchen")

    def test_dead_end_stays_put(self):
        self.director.execute('e')
        for command in ('e', 'd', 'e'):
            results = self.director.execute(command)
            self.assertEqual(results[0]['event_type'], "no_exit")
            self.assertEqual(self.director.current_room.name, "Library")
            self.assertEqual(self.director.state, AT_ROOM)

    def test_invalid_command_is_a_no_op(self):
        for command in ('x', '', '?'):
            results = self.director.execute(command)
            self.assertEqual(results[0]['event_type'], "invalid_command")
        self.assertIs(self.director.current_room, self.mansion.root)
        self.assertFalse(self.director.terminated)

    def test_stop_terminates(self):
        results = self.director.execute('s')
        self.assertEqual(results[0]['event_type'], "exploration_ended")
        self.assertEqual(results[0]['data']['reason'], "stop")
        self.assertEqual(self.director.state, TERMINATED)

    def test_end_of_input_terminates_like_stop(self):
        results = self.director.execute(None)
        self.assertEqual(results[0]['data']['reason'], "end_of_input")
        self.assertTrue(self.director.terminated)

    def test_commands_after_termination_are_errors(self):
        self.director.execute('s')
        results = self.director.execute('e')
        self.assertEqual(results[0]['event_type'], "error")
        self.assertIs(self.director.current_room, self.mansion.root)


class TestExploration(unittest.TestCase):
    def test_collect_then_move_then_stop(self):
        director, ledger, text = play(['e', 's'])
        self.assertEqual(list(ledger), ["torn letter"])
        self.assertEqual(director.current_room.name, "Library")
        self.assertIn("Clue collected", text)
        self.assertIn("You are in: Library", text)
        self.assertIn("There is no clue here", text)
        self.assertIn("You decided to end the exploration", text)
        self.assertIn("A dead end", text)

    def test_revisit_reports_already_collected(self):
        # An invalid command keeps the detective in the hall, which is entered again.
        director, ledger, text = play(['x', 's'])
        self.assertIn("Invalid command", text)
        self.assertIn("already collected this clue; it was not duplicated", text)
        self.assertEqual(len(ledger), 1)

    def test_dead_end_reprompts_until_stop(self):
        director, ledger, text = play(['e', 'e', 'd', 's'])
        self.assertIn("There is no room to the left", text)
        self.assertIn("There is no room to the right", text)
        self.assertEqual(text.count("You are in: Library"), 3)
        self.assertIn("A dead end", text)
        self.assertTrue(director.terminated)

    def test_input_closing_ends_exploration(self):
        director, ledger, text = play(['d'])
        self.assertEqual(director.current_room.name, "Kitchen")
        self.assertIn("No more input", text)
        self.assertEqual(list(ledger), ["torn letter"])

    def test_debug_narration_shows_raw_events(self):
        mansion, catalog = scenario_mansion()
        console = ScriptedConsole(['s'])
        Director(mansion, catalog).run(Listener(console), Narrator(console, debug=True))
        self.assertIn("DEBUG: Director Event", console.text)
        self.assertIn('"event_type": "clue_collected"', console.text)


if __name__ == '__main__':
    unittest.main()
