# Manager-drawn lottery
# Entrants stake at least the minimum, the manager draws one winner who
# receives the whole pool, and a new round starts.
# State Variables
manager = Variable()
players = Variable()
last_winner = Variable()
token_contract = Variable()
minimum_stake = Variable()
round_number = Variable()

# Events
EnterEvent = LogEvent(
    event="Enter",
    params={
        "player": {"type": str, "idx": True},
        "amount": {"type": (int, float, decimal)}
    }
)

WinnerPickedEvent = LogEvent(
    event="WinnerPicked",
    params={
        "winner": {"type": str, "idx": True},
        "amount": {"type": (int, float, decimal)},
        "round": {"type": int}
    }
)

@construct
def seed(token: str = 'currency', min_stake: float = 0.01):
    assert min_stake > 0, "Minimum stake must be positive"

    manager.set(ctx.caller)
    players.set([])
    last_winner.set(None)
    token_contract.set(token)
    minimum_stake.set(min_stake)
    round_number.set(0)


# Helper functions

def assert_is_manager():
    assert ctx.caller == manager.get(), "Only the manager can pick a winner!"


def pool_balance():
    token = importlib.import_module(token_contract.get())
    return token.balance_of(address=ctx.this)


# User functions

@export
def enter(amount: float):
    minimum = minimum_stake.get()
    assert amount >= minimum, f"Insufficient stake! Minimum is {minimum}."

    importlib.import_module(token_contract.get()).transfer_from(
        amount=amount,
        to=ctx.this,
        main_account=ctx.caller
    )

    entrants = players.get()
    entrants.append(ctx.caller)
    players.set(entrants)

    EnterEvent({
        "player": ctx.caller,
        "amount": amount
    })


@export
def pick_winner():
    assert_is_manager()

    entrants = players.get()
    assert len(entrants) > 0, "No players have entered this round!"

    # Draw
    random.seed()
    index = random.randint(0, len(entrants) - 1)
    winner = entrants[index]

    prize = pool_balance()
    importlib.import_module(token_contract.get()).transfer(
        amount=prize,
        to=winner
    )

    last_winner.set(winner)
    players.set([])
    round_number.set(round_number.get() + 1)

    WinnerPickedEvent({
        "winner": winner,
        "amount": prize,
        "round": round_number.get()
    })


# Read-only functions

@export
def get_players():
    return players.get()


@export
def get_last_winner():
    return last_winner.get()


@export
def get_manager():
    return manager.get()


@export
def get_pool():
    return pool_balance()


@export
def get_lottery_info():
    return {
        "manager": manager.get(),
        "token_contract": token_contract.get(),
        "minimum_stake": minimum_stake.get(),
        "player_count": len(players.get()),
        "pool": pool_balance(),
        "last_winner": last_winner.get(),
        "round": round_number.get()
    }
