"""
Basic usage example for FP Elo.
"""

from fp_elo import EloRating, EloConfig, Outcome, expected_score, expected_percentage, elo


def mock_compare(answer_a, answer_b):
    # Simple logic: longer answer wins
    if len(answer_a) > len(answer_b):
        return "A"
    elif len(answer_b) > len(answer_a):
        return "B"
    return "TIE"


def main():
    print("FP Elo Demonstration")
    print("--------------------")
    
    # Initialise a new player rating with a rating of 1000
    player_one = EloRating.new()
    
    # Or with your own value, e.g. one loaded from a database
    player_two = EloRating(1325)
    
    # A smaller k means the ratings do not change as much
    config = EloConfig(k=20)
    
    print(f"Player one: {player_one.rating}")
    print(f"Player two: {player_two.rating}")
    print(f"Chance for player one: {expected_percentage(expected_score(player_one, player_two))}%")
    
    # The outcome is always from player one's perspective
    new_one, new_two = elo(player_one, player_two, Outcome.WIN, config)
    print(f"After an upset win: {new_one.rating} / {new_two.rating}")
    
    # A small round robin, decided by the mock judge
    answers = {
        "short": "Paris.",
        "medium": "Paris is the capital of France.",
        "long": "The capital of France is Paris, a city known for its art, culture, and the Eiffel Tower.",
    }
    ratings = {name: EloRating() for name in answers}
    
    names = list(answers)
    for i, a in enumerate(names):
        for b in names[i + 1:]:
            outcome = Outcome.from_winner(mock_compare(answers[a], answers[b]))
            ratings[a], ratings[b] = elo(ratings[a], ratings[b], outcome)
    
    print("\nRound robin ratings:")
    for name, rating in sorted(ratings.items(), key=lambda x: -x[1].rating):
        print(f"  {name}: {rating.rating}")


if __name__ == "__main__":
    main()
