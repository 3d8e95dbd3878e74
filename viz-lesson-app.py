"""
Data Visualization Lesson
streamlit run viz-lesson-app.py
"""

from viz_lesson.main import main

main()
