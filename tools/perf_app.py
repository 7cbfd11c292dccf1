"""Profile document reconstruction on synthetic block sets. Run with `streamlit run tools/perf_app.py`."""

import cProfile
import pstats
import time

import pandas as pd
import streamlit as st

from docrecon.blocks import OperationKind, synthetic_block_set
from docrecon.processor import process_document

st.set_page_config(page_title="docrecon profiler", layout="wide")

st.title("Reconstruction profiler")

with st.sidebar:
    st.header("Block set")
    line_count = st.number_input("LINE blocks", min_value=0, max_value=500_000, value=50_000, step=5_000)
    pages = st.number_input("Pages", min_value=1, max_value=2_000, value=200)
    structured = st.checkbox("Add a table and a form field per page", value=True)
    operation = st.selectbox("Operation", [k.value for k in OperationKind])
    seed = st.number_input("Seed", min_value=0, value=0)

    st.header("Display")
    min_time_ms = st.slider("Min cumulative time to show (ms)", 1, 100, 5)
    max_rows = st.slider("Max rows to display", 10, 100, 30)

    run_profile = st.button("Run profile", type="primary", use_container_width=True)

if "profile_run" not in st.session_state:
    st.session_state.profile_run = None

if run_profile:
    with st.spinner("Building blocks and profiling..."):
        block_set = synthetic_block_set(
            int(line_count),
            pages=int(pages),
            structured=structured,
            seed=int(seed),
            operation=OperationKind.parse(operation),
        )

        profiler = cProfile.Profile()
        started = time.perf_counter()
        profiler.enable()
        result = process_document(block_set)
        profiler.disable()
        wall_ms = (time.perf_counter() - started) * 1000

        rows = []
        for (filename, line, func_name), data in pstats.Stats(profiler).stats.items():
            ncalls, tottime, cumtime = data[0], data[2] * 1000, data[3] * 1000
            if cumtime < min_time_ms:
                continue
            rows.append(
                {
                    "location": f"{filename.split('/')[-1]}:{line}",
                    "function": func_name,
                    "calls": ncalls,
                    "total_time_ms": tottime,
                    "cumulative_time_ms": cumtime,
                    "ours": "docrecon" in filename,
                }
            )

        st.session_state.profile_run = {
            "rows": rows,
            "wall_ms": wall_ms,
            "blocks": len(block_set),
            "result": result,
        }

run = st.session_state.profile_run
if not run:
    st.info("Pick a block set size and click 'Run profile'")
else:
    result = run["result"]

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Wall time", f"{run['wall_ms']:.1f} ms")
    col2.metric("Blocks", f"{run['blocks']:,}")
    col3.metric("Words", f"{result.word_count:,}")
    col4.metric("Structured data", "yes" if result.has_structured_data else "no")

    if result.structured_data is not None and not result.has_structured_data and run["blocks"]:
        st.warning("Tables and forms were skipped by the structured block limit")

    df = pd.DataFrame(run["rows"])
    tab_all, tab_ours = st.tabs(["All functions", "docrecon only"])

    with tab_all:
        if df.empty:
            st.info("Nothing above the time threshold")
        else:
            st.dataframe(
                df.sort_values("cumulative_time_ms", ascending=False).head(max_rows).drop(columns=["ours"]),
                hide_index=True,
                column_config={
                    "total_time_ms": st.column_config.NumberColumn("Total (ms)", format="%.2f"),
                    "cumulative_time_ms": st.column_config.NumberColumn("Cumulative (ms)", format="%.2f"),
                },
            )

    with tab_ours:
        ours = df[df["ours"]] if not df.empty else df
        if ours.empty:
            st.info("No docrecon functions above the time threshold")
        else:
            ours = ours.sort_values("total_time_ms", ascending=False).head(max_rows)
            st.bar_chart(ours.set_index("function")["total_time_ms"])
            st.download_button(
                label="Download as CSV",
                data=ours.to_csv(index=False),
                file_name="docrecon_profile.csv",
                mime="text/csv",
            )
