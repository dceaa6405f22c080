# Drive the sandbox headless with synthetic input and print text frames.
from gravity_sandbox import Sandbox, FrameInput, Action, Button, ButtonState, KeyState, Vec2
from gravity_sandbox.renderer import DebugRenderer

sandbox = Sandbox()
renderer = DebugRenderer(verbose=False)

click = {Button.PRIMARY: ButtonState(pressed=True, held=True)}
frames = [
    FrameInput(dt=1 / 60),
    FrameInput(pointer=Vec2(100, 100), buttons=click,
               keys={Action.ADD_BODY: KeyState(held=True)}, dt=1 / 60),
    FrameInput(pointer=Vec2(400, 400), buttons=click,
               keys={Action.CENTER_BODY: KeyState(held=True)}, dt=1 / 60),
    FrameInput(keys={Action.ZOOM_OUT: KeyState(held=True)}, dt=0.5),
]
for frame in frames:
    sandbox.update(frame)
    renderer.render_sandbox(sandbox)
