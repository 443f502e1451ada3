ANALYSIS_INSTRUCTION = "Analyze this legal document and provide a summary:"


def build_analysis_prompt(document_text: str) -> str:
    return f"{ANALYSIS_INSTRUCTION}\n\n{document_text}"
