# pages/5_Coin_Flip.py
# Two coins, three bets: two heads, two tails, or one of each.

import streamlit as st

from vizcore import config
from vizcore.figures import fig_coin_outcomes
from vizcore.probability import OPTIONS, all_outcomes
from vizcore.session import CoinFlipSession

config.configure_logging()

st.set_page_config(page_title="Coin Flip Probability", layout="wide")
st.title("Coin Flip Probability")

st.write(
    """
    You and a friend each flip a coin to decide who buys the barbecue meat.
    Whoever guessed the result skips the chore. Which bet should you pick?
    """
)

if "coin_session" not in st.session_state:
    st.session_state.coin_session = CoinFlipSession()
session: CoinFlipSession = st.session_state.coin_session

st.sidebar.header("Your bet")
choice = st.sidebar.radio(
    "Option",
    list(OPTIONS),
    index=list(OPTIONS).index(session.params.choice),
    format_func=lambda k: OPTIONS[k].title,
)
if choice != session.params.choice:
    session.choose(choice)

n = st.sidebar.slider("Number of simulations", 5, 100, session.params.n_simulations, 5)
if n != session.params.n_simulations:
    session.set_simulations(n)

if st.sidebar.button("Run simulation"):
    session.simulate()

probs = session.exact_probabilities()

left, right = st.columns([1, 2], gap="large")

with left:
    st.subheader("All outcomes")
    st.dataframe(
        [{"coins": o, "wins": next(opt.title for opt in OPTIONS.values() if o in opt.favorable_outcomes)}
         for o in all_outcomes()],
        use_container_width=True,
    )
    st.metric(f"P({OPTIONS[choice].title})", f"{probs[choice] * 100:.1f}%")

    stats = session.stats()
    if session.outcome() is not None:
        st.metric("Simulated win rate", f"{stats.win_rate:.1f}%",
                  delta=f"{stats.wins} wins / {stats.losses} losses", delta_color="off")

with right:
    f_exact, f_sim = fig_coin_outcomes(session)
    st.plotly_chart(f_exact, use_container_width=True)
    st.plotly_chart(f_sim, use_container_width=True)

with st.expander("Punchline"):
    st.markdown(
        """
- Four equally likely outcomes: HH, HT, TH, TT.
- "One of each" covers two of them, so it wins half the time.
- "Two heads" and "two tails" each win only a quarter of the time.
        """.strip()
    )
