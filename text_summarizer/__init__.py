from .datatypes import Sentence, Document, Edge, Graph, TermVector, ScoreVector, TagList
from .config import SummaryConfig, KeywordConfig
from .preprocessing import STOPWORDS, split_sentences, tokenize, preprocess_text
from .features import compute_idf, compute_tfidf_vectors, cosine_similarity, compute_similarity_matrix
from .graphing import build_graph, isolated_nodes, to_networkx
from .scoring import RankResult, rank_sentences, pagerank_scores
from .summarize import summarize, summarize_with_fallback, generate_summary, select_top_indices, target_sentence_count
from .keywords import extract_keywords, parse_keyword_metadata, rank_frequent_tokens
