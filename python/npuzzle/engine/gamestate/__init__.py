from npuzzle.engine.gamestate.state import MOVE_ORDER, State, manhattan

__all__ = ["MOVE_ORDER", "State", "manhattan"]
