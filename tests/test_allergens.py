from advent.allergens import Food, FoodListing, parse_food_listing

TEXT = """mxmxvkd kfcds sqjhc nhms (contains dairy, fish)
trh fvjkl sbzzf mxmxvkd (contains dairy)
sqjhc fvjkl (contains soy)
sqjhc mxmxvkd sbzzf (contains fish)"""


def _listing():
    return FoodListing(
        [
            Food(["mxmxvkd", "kfcds", "sqjhc", "nhms"], ["dairy", "fish"]),
            Food(["trh", "fvjkl", "sbzzf", "mxmxvkd"], ["dairy"]),
            Food(["sqjhc", "fvjkl"], ["soy"]),
            Food(["sqjhc", "mxmxvkd", "sbzzf"], ["fish"]),
        ]
    )


def test_parse_food_listing():
    assert parse_food_listing(TEXT) == _listing()


def test_food_without_allergens_parses():
    listing = parse_food_listing("aaa bbb")
    assert listing.foods == [Food(["aaa", "bbb"], [])]


def test_find_non_allergenic_ingredients():
    safe, allergic = _listing().find_non_allergenic_ingredients()
    assert sorted(safe) == ["kfcds", "nhms", "sbzzf", "trh"]
    assert allergic == ["mxmxvkd", "sqjhc", "fvjkl"]


def test_count_occurrences_for():
    counts = _listing().count_occurrences_for(["kfcds", "nhms", "sbzzf", "trh"])
    assert counts == {"kfcds": 1, "nhms": 1, "sbzzf": 2, "trh": 1}