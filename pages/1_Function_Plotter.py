import streamlit as st
import sys
import os

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from graphcalc.config import PlotterConfig
from graphcalc.functions import FunctionList
from graphcalc.interactive_viewer import render_interactive_graph
from graphcalc.plotter import GraphPlotter
from graphcalc.surfaces import SvgSurface

st.set_page_config(layout="wide", page_title="Function Plotter")

# --- CSS Tweaks ---
st.markdown("""
    <style>
        header {visibility: hidden;}
        .block-container { padding-top: 3rem !important; padding-bottom: 1rem; }
        [data-testid="stSidebar"] hr { margin-top: 0.5rem !important; margin-bottom: 0.5rem !important; }
        div[data-testid="column"] { padding: 0px; }
    </style>
""", unsafe_allow_html=True)

PAN_STEP_PX = 80
config = PlotterConfig()

# --- Session State: one plotter widget and its function list per browser session ---
if 'functions' not in st.session_state:
    st.session_state.functions = FunctionList(config.palette)
    st.session_state.functions.add("x^2")

if 'plotter' not in st.session_state:
    plotter = GraphPlotter(config)
    plotter.attach(SvgSurface(config.width, config.height))
    st.session_state.plotter = plotter

functions: FunctionList = st.session_state.functions
plotter: GraphPlotter = st.session_state.plotter


def add_func():
    functions.add(st.session_state.new_expr)
    st.session_state.new_expr = ""


def remove_func(func_id):
    functions.remove(func_id)


# --- SIDEBAR: Functions ---
st.sidebar.title("📈 Functions")
st.sidebar.text_input("f(x) =", key="new_expr", placeholder="e.g. x^2, sin(x), tan(x), log(x), sqrt(x)",
                      on_change=add_func)
st.sidebar.button("➕ Add Function", on_click=add_func, use_container_width=True)
st.sidebar.markdown("---")

if not len(functions):
    st.sidebar.info("No functions added yet.")

for entry in functions:
    with st.sidebar.container(border=True):
        c_expr, c_del = st.columns([5, 1])
        c_expr.code(f"f(x) = {entry.expression}", language=None)
        c_del.button("🗑️", key=f"del_{entry.id}", on_click=remove_func, args=(entry.id,))

        c_vis, c_col = st.columns([1, 2])
        visible = c_vis.checkbox("Show", entry.visible, key=f"vis_{entry.id}")
        if visible != entry.visible:
            functions.toggle(entry.id)

        palette = list(functions.palette)
        if entry.color not in palette:
            palette.append(entry.color)
        color = c_col.selectbox("Color", palette, index=palette.index(entry.color), key=f"col_{entry.id}",
                                label_visibility="collapsed")
        if color != entry.color:
            functions.set_color(entry.id, color)

# Hand the current list to the widget before any pointer event reads it
plotter.set_functions(functions)

# --- MAIN LAYOUT ---
st.subheader("Preview")

cx, cy = config.width / 2, config.height / 2

c_probe_x, c_probe_y, c_probe_on = st.columns([3, 3, 1])
probe_x = c_probe_x.slider("Pointer x (px)", 0, config.width, int(cx))
probe_y = c_probe_y.slider("Pointer y (px)", 0, config.height, int(cy))
hover = c_probe_on.checkbox("Values", value=True)

c1, c2, c3, c4, c5, c6, c7 = st.columns(7)
# Panning left means dragging the content to the right
if c1.button("⬅️", use_container_width=True):
    plotter.drag(cx, cy, cx + PAN_STEP_PX, cy)
if c2.button("➡️", use_container_width=True):
    plotter.drag(cx, cy, cx - PAN_STEP_PX, cy)
if c3.button("⬆️", use_container_width=True):
    plotter.drag(cx, cy, cx, cy + PAN_STEP_PX)
if c4.button("⬇️", use_container_width=True):
    plotter.drag(cx, cy, cx, cy - PAN_STEP_PX)
if c5.button("➕ Zoom", use_container_width=True):
    plotter.wheel(probe_x, probe_y, -1)
if c6.button("➖ Zoom", use_container_width=True):
    plotter.wheel(probe_x, probe_y, 1)
if c7.button("Reset", use_container_width=True):
    plotter.reset_view()

if hover:
    plotter.pointer_move(probe_x, probe_y)
else:
    plotter.pointer_leave()

v = plotter.viewport
st.caption(f"x ∈ [{v.x_min:.3f}, {v.x_max:.3f}]   y ∈ [{v.y_min:.3f}, {v.y_max:.3f}]")

render_interactive_graph(plotter.surface.tostring(), plotter.tooltip, config)

st.markdown("* Use the arrows to move the view\n* Zoom keeps the point under the pointer fixed\n"
            "* Move the pointer sliders to read the function values")
