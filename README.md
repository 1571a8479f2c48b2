# advent

Solutions to a selection of Advent of Code puzzles from 2017 to 2020,
as plain Python functions. Most functions take the puzzle input as a
string and return the answer. The package has no dependencies beyond
the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from advent.captcha import inverse_captcha
from advent.fuel import total_fuel_requirement
from advent.polymer import reduce_polymer
from advent.combat import parse_decks, recursive_battle

inverse_captcha("123123")                # 12
total_fuel_requirement("12\n14\n1969")   # 658
reduce_polymer("dabAcCaCBAcCcaDA")       # "dabCBAcaDA"

decks = "Player 1:\n9\n2\n6\n3\n1\n\nPlayer 2:\n5\n8\n4\n7\n10\n"
first, second = parse_decks(decks)
winner = recursive_battle(first, second)
winner.score()                           # 291
```

Malformed input raises `ValueError` (or `IndexError` where a program or
jump list runs out of bounds) rather than returning a made-up answer.

## Modules

| Year | Module | Puzzle | Main functions |
|------|--------|--------|----------------|
| 2017 | `advent.captcha` | Inverse captcha | `inverse_captcha` |
| 2017 | `advent.spreadsheet` | Spreadsheet checksum | `checksum` |
| 2017 | `advent.spiral` | Spiral memory | `manhattan_distance_to`, `to_cartesian_coordinate`, `first_cell_larger_than` |
| 2017 | `advent.passphrase` | High-entropy passphrases | `is_valid_passphrase`, `count_valid_passphrases` |
| 2017 | `advent.trampolines` | Maze of twisty trampolines | `parse_jump_instructions`, `jump_iterations`, `derive_jump_iterations` |
| 2017 | `advent.memory_banks` | Memory reallocation | `serialize`, `redistribute`, `num_unique_distributions` |
| 2017 | `advent.recursive_circus` | Recursive circus | `find_root_of_call_tree`, `find_imbalance`, `Program` |
| 2017 | `advent.registers` | Register instruction parsing | `parse_instruction`, `Instruction`, `Condition` |
| 2018 | `advent.calibration` | Chronal calibration | `calibrate`, `calibrate_duplication` |
| 2018 | `advent.box_ids` | Inventory management | `checksum`, `common_box_ids`, `levenshtein_distance` |
| 2018 | `advent.claims` | Fabric claims | `parse_claim`, `claimset_from_text`, `Claimset` |
| 2018 | `advent.guards` | Guard sleep schedules | `parse_event_log`, `find_sleepiest_guard`, `find_sleepiest_minute`, `find_sleepiest_guard_minute` |
| 2018 | `advent.polymer` | Alchemical reduction | `reduce_polymer`, `optimal_reduction` |
| 2018 | `advent.coordinates` | Chronal coordinates | `find_largest_finite_area`, `find_region_area_minimized_by_constraint` |
| 2018 | `advent.steps` | Step ordering | `determine_step_order`, `determine_instruction_sla` |
| 2019 | `advent.fuel` | Rocket fuel requirements | `fuel_for_mass`, `total_fuel_requirement`, `total_fuel_requirement_including_fuel_mass` |
| 2019 | `advent.intcode` | Intcode machine (add, multiply, halt) | `parse_program`, `run`, `run_intcode_machine`, `reverse_engineer_intcode_machine` |
| 2019 | `advent.wires` | Crossed wires | `find_nearest_intersection`, `find_minimal_total_steps`, `Point` |
| 2020 | `advent.boarding` | Boarding passes | `find_seat_location`, `find_max_seat_id`, `find_missing_seat_id` |
| 2020 | `advent.adapters` | Joltage adapters | `find_jolt_differences`, `count_distinct_possible_arrangements` |
| 2020 | `advent.allergens` | Allergen assessment | `parse_food_listing`, `FoodListing` |
| 2020 | `advent.combat` | Crab combat | `parse_decks`, `battle`, `recursive_battle`, `Deck` |
| 2020 | `advent.handshake` | Door and card handshake | `determine_encryption_key`, `Encryptor` |

## What the package does not do

There is no command-line program, and nothing here downloads puzzle
input. Read your input yourself and pass its text to the functions above.