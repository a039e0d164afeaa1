import time
import dearpygui.dearpygui as dpg

from ropesim.rope import DAMPING, GRAVITY, TENSION, WIND


def _make_callbacks(shared):
    def gravity_cb(sender, app_data, user_data):
        shared['gravity'] = float(app_data)
    def damping_cb(sender, app_data, user_data):
        shared['damping'] = float(app_data)
    def wind_cb(sender, app_data, user_data):
        shared['wind'] = float(app_data)
    def tension_cb(sender, app_data, user_data):
        shared['tension'] = float(app_data)
    def chain_cb(sender, app_data, user_data):
        shared['show_chain'] = bool(app_data)
    def pause_cb():
        shared['toggle_pause'] = True
    def reset_cb():
        shared['reset_board'] = True
    def exit_cb():
        shared['__exit__'] = True
    return gravity_cb, damping_cb, wind_cb, tension_cb, chain_cb, pause_cb, reset_cb, exit_cb


def run_gui(shared):
    """
    Run DearPyGui in its own process. Writes values into `shared` dict.
    """
    dpg.create_context()

    gravity_cb, damping_cb, wind_cb, tension_cb, chain_cb, pause_cb, reset_cb, exit_cb = _make_callbacks(shared)

    with dpg.window(label="String Controls", tag="controls_window", width=380, height=360):
        dpg.add_text("Forces")
        dpg.add_spacer()
        dpg.add_slider_float(label="Gravity", tag="gravity_slider", default_value=float(shared.get('gravity', GRAVITY)),
                             min_value=0.0, max_value=2.0, callback=gravity_cb)
        dpg.add_slider_float(label="Damping", tag="damping_slider", default_value=float(shared.get('damping', DAMPING)),
                             min_value=0.5, max_value=1.0, callback=damping_cb)
        dpg.add_slider_float(label="Wind", tag="wind_slider", default_value=float(shared.get('wind', WIND)),
                             min_value=0.0, max_value=1.0, callback=wind_cb)
        dpg.add_text("Smoothing")
        dpg.add_slider_float(label="Tension", tag="tension_slider", default_value=float(shared.get('tension', TENSION)),
                             min_value=0.0, max_value=0.5, callback=tension_cb)
        dpg.add_checkbox(label="Show raw chain", tag="chain_checkbox", default_value=bool(shared.get('show_chain', False)),
                         callback=chain_cb)
        dpg.add_separator()
        dpg.add_button(label="Pause / Toggle", callback=lambda s, a, u: pause_cb())
        dpg.add_button(label="Reset Board", callback=lambda s, a, u: reset_cb())
        dpg.add_button(label="Exit GUI", callback=lambda s, a, u: exit_cb())
        dpg.add_spacer()
        dpg.add_text("Status:", tag="status_label")
        dpg.add_text("", tag="status_text")

    dpg.create_viewport(title='String Controls', width=400, height=400)
    dpg.set_primary_window("controls_window", True)
    dpg.setup_dearpygui()
    dpg.show_viewport()

    try:
        while not shared.get('__exit__', False) and dpg.is_dearpygui_running():
            status = (f"strings={shared.get('string_count', 0)}, "
                      f"gravity={float(shared.get('gravity', GRAVITY)):.2f}, "
                      f"damping={float(shared.get('damping', DAMPING)):.2f}, "
                      f"wind={float(shared.get('wind', WIND)):.2f}")
            dpg.set_value("status_text", status)
            dpg.render_dearpygui_frame()
            time.sleep(0.01)
    finally:
        dpg.destroy_context()


if __name__ == "__main__":
    from multiprocessing import Manager
    mgr = Manager()
    shared = mgr.dict()
    shared['gravity'] = GRAVITY
    shared['damping'] = DAMPING
    shared['wind'] = WIND
    shared['tension'] = TENSION
    run_gui(shared)
