import os
import gradio as gr
import requests
from vectorqa import config

API_URL = config.API_URL

def setup_index(docs_dir, index_name):
    """
    Asks the backend to create the index and upsert the documents.
    """
    payload = {"docs_dir": docs_dir or None, "index_name": index_name or None}
    try:
        response = requests.post(f"{API_URL}/setup", json=payload, timeout=600)

        if response.status_code == 200:
            data = response.json()
            status = "created" if data.get("created") else "already existed"
            return (
                f"Index **{data.get('index_name')}** {status}. "
                f"Upserted {data.get('vectors_upserted', 0)} vectors from "
                f"{data.get('documents', 0)} documents."
            )
        return f"Error: API returned status {response.status_code}\n{response.text}"

    except Exception as e:
        return f"Connection Error: {str(e)}"

def query_api(message, history, index_name=None):
    """
    Sends the user message to the FastAPI backend and returns the answer.
    """
    try:
        payload = {"query": message, "index_name": index_name or None}
        response = requests.post(f"{API_URL}/query", json=payload, timeout=60)

        if response.status_code == 200:
            data = response.json()
            answer = data.get("answer")
            if answer is None:
                return "No matching documents were found, so the model was not asked."

            sources = data.get("sources", [])
            source_text = "\n\n**Sources:**\n"
            seen = set()
            for src in sources:
                path = src.get('metadata', {}).get('txtPath', 'Unknown')
                if path not in seen:
                    seen.add(path)
                    source_text += f"- **{path}**\n"

            return f"{answer}{source_text}"
        else:
            return f"Error: API returned status {response.status_code}\n{response.text}"

    except Exception as e:
        return f"Connection Error: {str(e)}"

# Build the Interface
with gr.Blocks(title="Vector QA") as demo:
    gr.Markdown("# Vector QA")
    gr.Markdown("Index a folder of text documents, then ask questions about them.")

    with gr.Row():
        docs_box = gr.Textbox(label="Documents directory", placeholder=config.DOCUMENTS_DIR)
        index_box = gr.Textbox(label="Index name", placeholder=config.INDEX_NAME)
    setup_button = gr.Button("Create index and embed documents")
    setup_status = gr.Markdown()
    setup_button.click(setup_index, inputs=[docs_box, index_box], outputs=setup_status)

    chatbot = gr.ChatInterface(
        fn=query_api,
        textbox=gr.Textbox(placeholder="Ask a question about your documents", container=False, scale=7),
        additional_inputs=[index_box],
    )

def main():
    # Get auth from env if set
    auth = None
    user = os.getenv("GRADIO_USER")
    password = os.getenv("GRADIO_PASSWORD")
    if user and password:
        auth = (user, password)

    demo.launch(server_name="0.0.0.0", server_port=7860, auth=auth, share=False)

if __name__ == "__main__":
    main()
