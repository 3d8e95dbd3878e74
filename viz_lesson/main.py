"""
Data Visualization Lesson - Main Application
Walks the lesson section by section: description, code, chart
"""

import streamlit as st

from viz_lesson.config.settings import (
    DEFAULT_SETTINGS, LESSON_SECTIONS, THEMES, THEME_DEFAULTS
)
from viz_lesson.data.loader import load_datasets
from viz_lesson.errors import VizLessonError
from viz_lesson.lesson.registry import examples_for_section
from viz_lesson.lesson.runner import run_example
from viz_lesson.visualization.charts import mtcars_scatter
from viz_lesson.visualization.markup import strip_markup
from viz_lesson.visualization.render import STATIC, INTERACTIVE, show_figure
from viz_lesson.visualization.themes import LEGEND_POSITIONS


def configure_page():
    """Page settings"""
    st.set_page_config(
        page_title=DEFAULT_SETTINGS["page_title"],
        page_icon=DEFAULT_SETTINGS["page_icon"],
        layout=DEFAULT_SETTINGS["layout"]
    )


def render_sidebar():
    """Sidebar UI"""
    st.sidebar.header("📊 Data Visualization Lesson")
    st.sidebar.markdown("**Polished static and interactive charts**")

    section_keys = list(LESSON_SECTIONS)
    section = st.sidebar.radio(
        "📚 Section",
        section_keys,
        format_func=lambda key: LESSON_SECTIONS[key]["title"],
        key="section"
    )

    with st.sidebar.expander("⚙️ Display options"):
        show_code = st.checkbox("Show code", value=True, key="show_code")
        force_static = st.checkbox(
            "Render every chart as a static image",
            value=False,
            key="force_static"
        )

    return section, show_code, force_static


def render_example(example, datasets, show_code, force_static):
    """One example: description, optional code, its chart(s)"""
    st.subheader(example.title)
    st.markdown(example.description)

    rendered = run_example(example, datasets)
    if show_code:
        with st.expander("Code", expanded=False):
            st.code(rendered.source, language="python")

    if not rendered.ok:
        st.error(f"⚠️ {example.title} could not be rendered: {rendered.error}")
        return

    mode = STATIC if force_static else example.mode
    figures = rendered.figures
    if len(figures) > 1:
        # Galleries in two columns
        cols = st.columns(2)
        for i, fig in enumerate(figures):
            with cols[i % 2]:
                show_figure(fig, mode, key=f"{example.key}-{i}")
    else:
        for i, fig in enumerate(figures):
            show_figure(fig, mode, key=f"{example.key}-{i}")


def render_data_preview(datasets):
    """The raw tables behind every chart"""
    col1, col2 = st.columns(2)
    with col1:
        st.markdown("**mtcars**")
        st.dataframe(datasets["mtcars"], use_container_width=True, hide_index=True)
    with col2:
        st.markdown("**gapminder** (2007, labeled)")
        preview = datasets["gapminder_labeled"].copy()
        preview["label"] = preview["label"].map(strip_markup)
        st.dataframe(preview, use_container_width=True, hide_index=True)


def render_theme_playground(datasets, force_static):
    """Try theme options on the lesson scatter"""
    st.subheader("🎨 Theme playground")
    col1, col2, col3 = st.columns(3)
    with col1:
        theme = st.selectbox(
            "Theme",
            list(THEMES),
            index=list(THEMES).index(DEFAULT_SETTINGS["default_theme"])
            if DEFAULT_SETTINGS["default_theme"] in THEMES else 0,
            key="playground_theme"
        )
        base_size = st.slider("Base font size", 8, 24, THEME_DEFAULTS["base_size"], key="playground_size")
    with col2:
        grid_major = st.checkbox("Major gridlines", value=True, key="playground_grid_major")
        grid_minor = st.checkbox("Minor gridlines", value=False, key="playground_grid_minor")
        axis_line = st.checkbox("Axis lines", value=False, key="playground_axis_line")
    with col3:
        legend = st.selectbox("Legend", list(LEGEND_POSITIONS), key="playground_legend")
        title_color = st.color_picker("Title color", THEME_DEFAULTS["title_color"], key="playground_title_color")

    try:
        fig = mtcars_scatter(
            datasets["mtcars"],
            theme=theme,
            base_size=base_size,
            grid_major=grid_major,
            grid_minor=grid_minor,
            axis_line=axis_line,
            legend_position=legend,
            title_color=title_color
        )
    except VizLessonError as e:
        st.error(f"Theme error: {e}")
        return
    show_figure(fig, STATIC if force_static else INTERACTIVE, key="playground")


def render_section(section, datasets, show_code, force_static):
    """All examples of one section"""
    info = LESSON_SECTIONS[section]
    st.header(info["title"])
    st.markdown(info["description"])

    if section == "setup":
        render_data_preview(datasets)

    for example in examples_for_section(section):
        render_example(example, datasets, show_code, force_static)

    if section == "theming":
        render_theme_playground(datasets, force_static)


def main():
    """Main function"""
    configure_page()

    section, show_code, force_static = render_sidebar()

    st.title("📊 Data Visualization Lesson")
    st.markdown("**Theming, composition, rich text and interactivity with plotly**")

    with st.spinner("🔄 Loading datasets..."):
        try:
            datasets = load_datasets()
        except VizLessonError as e:
            st.error(f"⚠️ Could not load the sample datasets: {e}")
            st.stop()

    render_section(section, datasets, show_code, force_static)

    # Footer
    st.markdown("---")
    st.markdown(
        "<div style='text-align: center; color: #666;'>"
        "Data Visualization Lesson | Powered by Streamlit & Plotly"
        "</div>",
        unsafe_allow_html=True
    )


if __name__ == "__main__":
    main()
