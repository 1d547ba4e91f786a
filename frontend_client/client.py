import os
import requests
from frontend_client.utils.pretty_display import (
    print_info,
    print_error,
    print_border,
    print_startup_message,
    print_comparison,
    print_reference_lists,
    print_win,
)

DIFFICULTIES = {'1': 'easy', '2': 'medium', '3': 'hard'}


class GameClient:
    def __init__(self, base_url: str, session=None):
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()

    def _request(self, method: str, path: str, **kwargs) -> dict:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            return {"error": f"Could not reach the game server: {e}"}
        try:
            return response.json()
        except ValueError:
            return {"error": f"Unexpected response ({response.status_code})"}

    def get_reference_lists(self):
        return self._request("GET", "/reference_lists")

    def start_round(self, difficulty: str = None):
        payload = {}
        if difficulty:
            payload["difficulty"] = difficulty
        return self._request("POST", "/round/start", json=payload)

    def submit_guess(self, round_id: str, guess: str):
        payload = {"round_id": round_id, "guess": guess}
        return self._request("POST", "/round/guess", json=payload)

    def get_round(self, round_id: str):
        return self._request("GET", f"/round/{round_id}")


def play_round(client: GameClient, difficulty: str, read=input) -> str:
    """Run one round interactively. Returns the final round status."""
    response = client.start_round(difficulty)
    if "error" in response:
        print_error(response["error"])
        return "idle"

    round_id = response["round_id"]
    print_border()
    print_reference_lists(response["attributes"], response["races"])
    print_info(f"You have {response['hint_count']} hints this round.")
    print_info("Type 'quit' to give up.")

    while True:
        guess = read("Enter your guess: ").strip()
        if not guess:
            continue
        if guess.lower() == 'quit':
            return client.get_round(round_id).get("status", "in_progress")

        response = client.submit_guess(round_id, guess)
        if "error" in response:
            print_error(response["error"])
            continue

        print_comparison(response["result"]["result"])
        if response["status"] == "won":
            print_win(response["answer"])
            return "won"


def main():
    client = GameClient(base_url=os.getenv("GAME_SERVER_URL", "http://localhost:8000"))
    print_border()
    print("Monster Guess client v 1.0.0")

    while True:
        print_startup_message()
        choice = input("Enter choice (1-3), or 'q' to exit: ").strip().lower()
        if choice == 'q':
            print("Goodbye!")
            break
        if choice not in DIFFICULTIES:
            print("Invalid choice. Please enter 1, 2 or 3.")
            continue

        play_round(client, DIFFICULTIES[choice])

        again = input("Play again? (y/n): ").strip().lower()
        if again != 'y':
            print("Goodbye!")
            break


if __name__ == "__main__":
    main()
