from __future__ import annotations
import streamlit as st
import re
import pandas as pd
import numpy as np
from typing import List
import matplotlib.pyplot as plt
import networkx as nx
import io

from text_summarizer.config import SummaryConfig
from text_summarizer.preprocessing import preprocess_text, split_sentences
from text_summarizer.features import compute_idf, compute_tfidf_vectors, compute_similarity_matrix
from text_summarizer.graphing import build_graph, isolated_nodes, to_networkx
from text_summarizer.scoring import rank_sentences
from text_summarizer.summarize import generate_summary, select_top_indices, summarize_with_fallback, target_sentence_count
from text_summarizer.keywords import extract_keywords, parse_keyword_metadata, rank_frequent_tokens
from text_summarizer.logging_config import setup_logging, get_logger

logger = get_logger(__name__)

FULL_SUMMARY_SENTENCES = 6
EXCERPT_CHARS = 300

def extract_rtf_text(rtf_content: str) -> str:
    """Extract plain text from RTF content."""
    text = re.sub(r'\\\*.*?;', '', rtf_content)
    text = re.sub(r'\\[a-z]+-?\d* ?', '', text)
    text = re.sub(r'\\[^a-z]', '', text)
    text = re.sub(r'[{}]', '', text)
    return re.sub(r'\s+', ' ', text).strip()

def extract_markdown_text(md_content: str) -> str:
    """Extract plain text from Markdown content."""
    text = re.sub(r'```.*?```', '', md_content, flags=re.DOTALL)
    text = re.sub(r'^#{1,6}\s+', '', text, flags=re.MULTILINE)
    text = re.sub(r'\*{1,2}(.*?)\*{1,2}', r'\1', text)
    text = re.sub(r'_{1,2}(.*?)_{1,2}', r'\1', text)
    text = re.sub(r'!?\[([^\]]*)\]\([^)]+\)', r'\1', text)
    text = re.sub(r'`([^`]+)`', r'\1', text)
    text = re.sub(r'^-{3,}$', '', text, flags=re.MULTILINE)
    return re.sub(r'\n\s*\n', '\n\n', text).strip()

def load_text_from_file(uploaded_file) -> str:
    """Load plain article text from an uploaded file based on its extension."""
    file_extension = uploaded_file.name.lower().split('.')[-1]
    content = uploaded_file.read().decode("utf-8", errors="replace")
    if file_extension == 'rtf':
        return extract_rtf_text(content)
    if file_extension == 'md':
        return extract_markdown_text(content)
    return content

def make_excerpt(text: str, limit: int = EXCERPT_CHARS) -> str:
    text = re.sub(r'\s+', ' ', text).strip()
    return text if len(text) <= limit else text[:limit].rsplit(' ', 1)[0] + "..."

def preview(text: str, limit: int = 80) -> str:
    return text[:limit] + "..." if len(text) > limit else text

def draw_rank_graph(graph, scores: List[float], selected: List[int]):
    """Draw the similarity graph; node size follows rank score, selected sentences in orange."""
    G = to_networkx(graph)
    fig, ax = plt.subplots(figsize=(10, 8))
    ax.set_title("Sentence Similarity Graph", fontsize=14, fontweight='bold')

    if len(G.nodes) > 0:
        pos = nx.spring_layout(G, k=2, iterations=50, seed=42)
        top = max(scores) if scores else 1.0
        sizes = [300 + 1500 * (scores[i] / top) for i in G.nodes()]
        colors = ['orange' if i in selected else 'lightblue' for i in G.nodes()]
        nx.draw_networkx_nodes(G, pos, ax=ax, node_color=colors, node_size=sizes, alpha=0.8)

        edges = list(G.edges(data=True))
        if edges:
            weights = [d['weight'] for _, _, d in edges]
            max_weight = max(weights)
            nx.draw_networkx_edges(G, pos, ax=ax,
                                   width=[3 * (w / max_weight) for w in weights],
                                   alpha=0.6, edge_color='gray')
            if len(G.nodes) <= 10:
                edge_labels = {(u, v): f"{d['weight']:.2f}" for u, v, d in edges}
                nx.draw_networkx_edge_labels(G, pos, edge_labels, ax=ax, font_size=8)

        labels = {i: f"S{i+1}" for i in G.nodes()}
        nx.draw_networkx_labels(G, pos, labels, ax=ax, font_size=10, font_weight='bold')

    ax.set_aspect('equal')
    ax.axis('off')
    plt.tight_layout()

    buf = io.BytesIO()
    plt.savefig(buf, format='png', dpi=150, bbox_inches='tight')
    buf.seek(0)
    plt.close(fig)
    return buf

def create_sidebar_controls():
    """Sidebar controls for every summarizer option plus page keywords."""
    st.sidebar.header("Summary")
    num_sentences = st.sidebar.number_input("Sentences", min_value=1, max_value=50, value=3, step=1)
    use_ratio = st.sidebar.checkbox("Use compression ratio instead", value=False)
    ratio = st.sidebar.slider("Compression ratio", min_value=0.05, max_value=0.95, value=0.2, step=0.05,
                              disabled=not use_ratio)
    min_len = st.sidebar.number_input("Minimum sentence length (chars)", min_value=0, max_value=500,
                                      value=10, step=1)
    threshold = st.sidebar.slider("Similarity threshold", min_value=0.0, max_value=1.0, value=0.0, step=0.05,
                                  help="Edges below this similarity are dropped from the graph")

    st.sidebar.header("PageRank")
    damping = st.sidebar.slider("Damping", min_value=0.0, max_value=1.0, value=0.85, step=0.05)
    max_iter = st.sidebar.number_input("Max iterations", min_value=1, max_value=1000, value=100, step=10)
    tolerance = st.sidebar.select_slider("Tolerance", options=[1e-3, 1e-4, 1e-5, 1e-6, 1e-8], value=1e-6)

    st.sidebar.header("Tags")
    meta_keywords = st.sidebar.text_input("Page keywords (comma separated)", value="")

    st.sidebar.header("Debug Options")
    debug_mode = st.sidebar.checkbox("Enable Debug Mode", value=False, help="Show detailed pipeline steps")

    config = SummaryConfig.from_options({
        "numSentences": num_sentences,
        "ratio": ratio if use_ratio else None,
        "minSentenceLength": min_len,
        "similarityThreshold": threshold,
        "damping": damping,
        "maxIter": max_iter,
        "tolerance": tolerance,
    })
    return config, parse_keyword_metadata(meta_keywords), debug_mode

def debug_pipeline(text: str, config: SummaryConfig) -> str:
    """Run the summarizer stage by stage, showing each intermediate result."""

    st.header("Step 1: Segmentation & Tokenization")
    with st.expander("Sentence Details", expanded=True):
        raw_sentences = split_sentences(text)
        doc = preprocess_text(text, min_sentence_length=config.min_sentence_length)
        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Raw Sentences", len(raw_sentences))
        with col2:
            st.metric("Kept Sentences", len(doc.sentences))
        with col3:
            st.metric("Dropped (too short)", len(raw_sentences) - len(doc.sentences))
        st.dataframe(pd.DataFrame([{
            "Sentence #": s.idx + 1,
            "Text": preview(s.text),
            "Tokens": ", ".join(s.tokens),
        } for s in doc.sentences]), use_container_width=True)

    if len(doc.sentences) <= 1:
        st.info("One sentence or fewer survived filtering; no ranking needed.")
        return doc.sentences[0].text if doc.sentences else ""

    st.header("Step 2: TF-IDF Vectors")
    with st.expander("TF-IDF Details", expanded=False):
        idf_scores = compute_idf(doc)
        vectors = compute_tfidf_vectors(doc)
        st.dataframe(pd.DataFrame(
            [{"Term": t, "IDF": round(v, 4)} for t, v in sorted(idf_scores.items(), key=lambda x: -x[1])]
        ), use_container_width=True, height=200)
        for s, vec in zip(doc.sentences, vectors):
            top_terms = sorted(vec.items(), key=lambda x: x[1], reverse=True)[:5]
            st.write(f"**S{s.idx+1}:** " + (", ".join(f"{t}:{w:.3f}" for t, w in top_terms) or "No terms"))

    st.header("Step 3: Similarity Graph")
    with st.expander("Similarity Details", expanded=True):
        simM = compute_similarity_matrix(vectors, threshold=config.similarity_threshold)
        graph = build_graph(doc, simM)
        n = len(doc.sentences)
        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Edges", len(graph.edges))
        with col2:
            max_edges = n * (n - 1) // 2
            st.metric("Graph Density", f"{len(graph.edges) / max_edges:.2%}" if max_edges else "n/a")
        with col3:
            st.metric("Isolated Sentences", len(isolated_nodes(graph)))
        if n <= 50:
            labels = [f"S{i+1}" for i in range(n)]
            st.dataframe(pd.DataFrame(simM, columns=labels, index=labels), use_container_width=True)
        else:
            flat_sim = simM[np.triu_indices(n, k=1)]
            st.info(f"Matrix too large to display ({n}x{n})")
            col1, col2 = st.columns(2)
            with col1:
                st.metric("Mean Similarity", f"{np.mean(flat_sim):.3f}")
            with col2:
                st.metric("Max Similarity", f"{np.max(flat_sim):.3f}")

    st.header("Step 4: PageRank")
    with st.expander("Scoring Details", expanded=True):
        result = rank_sentences(simM, damping=config.damping, max_iter=config.max_iter,
                                tolerance=config.tolerance)
        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Iterations", result.iterations)
        with col2:
            st.metric("Converged", "yes" if result.converged else "no")
        with col3:
            st.metric("Score Mass", f"{sum(result.scores):.4f}")

    st.header("Step 5: Sentence Selection")
    with st.expander("Selection Details", expanded=True):
        k = target_sentence_count(n, config)
        selected = select_top_indices(result.scores, k)
        st.dataframe(pd.DataFrame([{
            "Sentence #": i + 1,
            "Score": f"{result.scores[i]:.4f}",
            "Selected": "yes" if i in selected else "no",
            "Text": doc.sentences[i].text,
        } for i in range(n)]), use_container_width=True)
        if n <= 50:
            try:
                st.image(draw_rank_graph(graph, result.scores, selected),
                         caption="Node size follows PageRank score; selected sentences in orange")
            except Exception as e:
                logger.warning("Graph visualization failed: %s", e)
                st.error(f"Could not generate graph visualization: {e}")

    return generate_summary(doc, result.scores, config)

def show_tags(text: str, meta_keywords: List[str]):
    st.subheader("Suggested Tags")
    tags = extract_keywords(text, meta_keywords)
    st.write(", ".join(tags) if tags else "No tags found")
    with st.expander("Most frequent words", expanded=False):
        st.dataframe(pd.DataFrame(rank_frequent_tokens(text), columns=["Word", "Count"]),
                     use_container_width=True)

def main():
    setup_logging()
    st.title("TextRank Summarizer")
    st.write("Upload an article to get an extractive summary and tag suggestions")

    config, meta_keywords, debug_mode = create_sidebar_controls()

    uploaded_file = st.file_uploader(
        "Choose a text file",
        type=['txt', 'rtf', 'md'],
        help="Upload an article to summarize (supports .txt, .rtf, .md formats)"
    )
    if uploaded_file is None:
        return

    text = load_text_from_file(uploaded_file)
    st.subheader("Original Text")
    st.text_area("Content", text, height=200, disabled=True)

    if st.button("Generate Summary", type="primary"):
        excerpt = make_excerpt(text)
        try:
            if debug_mode:
                st.markdown("---")
                st.title("Pipeline Debug Mode")
                short_summary = debug_pipeline(text, config) or excerpt
            else:
                with st.spinner("Generating summary..."):
                    short_summary = summarize_with_fallback(text, excerpt=excerpt, config=config)
            full_summary = summarize_with_fallback(text, excerpt=excerpt, config=config,
                                                   num_sentences=FULL_SUMMARY_SENTENCES, ratio=None)
        except Exception as e:
            logger.exception("Summary generation failed")
            st.error(f"Error generating summary: {e}")
            st.exception(e)
            short_summary = full_summary = excerpt

        st.markdown("---")
        st.header("Summary")
        st.text_area("Short summary", short_summary or "Could not summarize this article.",
                     height=150, disabled=True)
        if full_summary and full_summary != short_summary:
            with st.expander("Full summary"):
                st.write(full_summary)

        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Original Words", len(text.split()))
        with col2:
            st.metric("Summary Words", len(short_summary.split()) if short_summary else 0)
        with col3:
            compression = len(short_summary.split()) / len(text.split()) if text.split() and short_summary else 0
            st.metric("Compression", f"{compression:.2%}")

        show_tags(text, meta_keywords)

if __name__ == "__main__":
    main()
