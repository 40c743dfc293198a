"""
main.py — Bootstrap

1. Load tuning constants
2. Create the app
3. Build the level catalog (validates the content)
4. Load sprites (best-effort)
5. Push the game scene
6. Run
"""

from core import tuning
from core.app import App
from core.assets import SpriteBank
from logic.state import new_state
from scenes.game_scene import GameScene


def main():
    tuning.load()

    app = App(title="Dad and Michael's Family Adventures")

    # -- Catalog first: a malformed level should fail before the window loop --
    state = new_state()
    print(f"[MAIN] {len(state.levels)} levels in catalog")

    # -- Sprites need a display mode for convert_alpha() --
    sprites = SpriteBank.load()

    # -- Start --
    app.push_scene(GameScene(state=state, sprites=sprites))
    app.run()


if __name__ == "__main__":
    main()
