import streamlit as st
import sys
import os

# Add this directory to path to import graphcalc
sys.path.append(os.path.dirname(__file__))

from graphcalc import __version__

st.set_page_config(
    page_title="graphcalc",
    page_icon="📐",
    layout="wide"
)

st.title("📐 Graphing Calculator")
st.markdown(r"""
### Plot $y = f(x)$ and explore it

Type one or more functions of $x$, pan and zoom the view, and read the value of every
visible function at the pointer.

---
""")

col1, col2 = st.columns(2)

with col1:
    st.subheader("Functions")
    st.info("Add, hide, recolour and remove plotted functions.")
    st.page_link("pages/1_Function_Plotter.py", label="Function Plotter", icon="📈", use_container_width=True)
    st.markdown("* Powers with `^`: `x^2`\n* Implicit products: `2x`, `3sin(x)`\n"
                "* `sin`, `cos`, `tan`, `log`, `sqrt`, `exp`, `abs`, `pi`, `e`")

with col2:
    st.subheader("Desktop viewer")
    st.info("Drag to pan, scroll to zoom at the cursor, hover to read values.")
    st.code('graphcalc -e "x^2" -e "tan(x)"', language="bash")
    st.code('graphcalc -e "1/x" -o graph.svg', language="bash")

st.markdown("---")
st.caption(f"graphcalc v{__version__}")
