from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter()

INDEX_HTML = """<!DOCTYPE html>
<html><head><meta charset="utf-8"><title>DocTranslate</title>
<style>
  * { box-sizing: border-box; margin: 0; padding: 0; }
  body { font-family: system-ui, sans-serif; background: #0f172a; color: #e2e8f0; padding: 2rem; max-width: 960px; margin: auto; }
  h1 { color: #38bdf8; margin-bottom: 0.5rem; }
  h2 { font-size: 1rem; color: #94a3b8; margin: 1.5rem 0 0.5rem; }
  .sub { color: #94a3b8; margin-bottom: 2rem; }
  .upload { border: 2px dashed #334155; border-radius: 8px; padding: 2rem; text-align: center; cursor: pointer; }
  .upload.drag-over { border-color: #38bdf8; background: #1e293b; }
  .hidden { display: none !important; }
  .preview { background: #1e293b; border-radius: 8px; padding: 1rem; display: flex; justify-content: space-between; }
  select { background: #1e293b; color: #e2e8f0; border: 1px solid #334155; border-radius: 6px; padding: 0.5rem; }
  .cards { display: grid; grid-template-columns: repeat(3, 1fr); gap: 0.5rem; }
  .style-card { background: #1e293b; border: 1px solid #334155; border-radius: 8px; padding: 0.75rem; cursor: pointer; }
  .style-card.selected { border-color: #38bdf8; }
  label { margin-right: 1rem; }
  button { background: #0284c7; color: white; border: none; padding: 0.75rem 2rem; border-radius: 8px;
           font-size: 16px; cursor: pointer; margin-top: 1rem; }
  button:hover { background: #0369a1; }
  button:disabled { opacity: 0.5; cursor: wait; }
  #translatedText { margin-top: 1rem; background: #1e293b; border-radius: 8px; padding: 1.5rem;
            white-space: pre-wrap; font-size: 14px; min-height: 100px; border: 1px solid #334155; }
</style></head>
<body>
  <h1>DocTranslate</h1>
  <p class="sub">Upload a TXT, PDF or DOCX file and get a natural, human-sounding translation.</p>

  <div class="upload" id="uploadArea">Drop a file here or click to choose one</div>
  <input type="file" id="fileInput" accept=".txt,.pdf,.docx" class="hidden">
  <div class="preview hidden" id="filePreview"><span class="file-name"></span><a href="#" id="removeFile">remove</a></div>

  <h2>Languages</h2>
  <select id="sourceLang">
    <option value="auto">Auto-detect</option><option value="el">Greek</option><option value="en">English</option>
    <option value="fr">French</option><option value="de">German</option><option value="es">Spanish</option>
    <option value="it">Italian</option><option value="pt">Portuguese</option><option value="ru">Russian</option>
    <option value="zh">Chinese</option><option value="ja">Japanese</option>
  </select>
  &rarr;
  <select id="targetLang">
    <option value="en">English</option><option value="el">Greek</option><option value="fr">French</option>
    <option value="de">German</option><option value="es">Spanish</option><option value="it">Italian</option>
    <option value="pt">Portuguese</option><option value="ru">Russian</option><option value="zh">Chinese</option>
    <option value="ja">Japanese</option>
  </select>

  <h2>Style</h2>
  <div class="cards">
    <div class="style-card" data-style="academic">Academic</div>
    <div class="style-card selected" data-style="professional">Professional</div>
    <div class="style-card" data-style="email">Email</div>
    <div class="style-card" data-style="formal">Formal</div>
    <div class="style-card" data-style="casual">Casual</div>
    <div class="style-card" data-style="creative">Creative</div>
  </div>

  <h2>Format</h2>
  <label><input type="radio" name="format" value="paragraphs" checked> Paragraphs</label>
  <label><input type="radio" name="format" value="letter"> Letter</label>
  <label><input type="radio" name="format" value="recommendation"> Recommendation</label>
  <label><input type="radio" name="format" value="bullets"> Bullets</label>

  <h2>Context</h2>
  <select id="context">
    <option value="general">General</option><option value="academic">Academic</option>
    <option value="business">Business</option><option value="presentation">Presentation</option>
    <option value="research">Research</option>
  </select>

  <h2>Options</h2>
  <label><input type="checkbox" id="literalTranslation"> Literal</label>
  <label><input type="checkbox" id="withExplanations"> Explanations</label>
  <label><input type="checkbox" id="deepAnalysis"> Deep analysis</label>
  <label><input type="checkbox" id="withExamples"> Examples</label>

  <div><button id="translateBtn">Translate</button></div>
  <p class="sub hidden" id="loadingSection">Translating...</p>

  <div class="hidden" id="resultsSection">
    <div id="translatedText"></div>
    <button id="copyBtn">Copy</button>
    <button id="downloadBtn">Download</button>
    <button id="newTranslationBtn">New translation</button>
  </div>
<script>
let uploadedFile = null;
let selectedStyle = 'professional';
const $ = (id) => document.getElementById(id);

function showFile(file) {
  uploadedFile = file;
  $('filePreview').querySelector('.file-name').textContent = file.name;
  $('filePreview').classList.remove('hidden');
  $('uploadArea').classList.add('hidden');
}
function removeFile(e) {
  if (e) e.preventDefault();
  uploadedFile = null;
  $('fileInput').value = '';
  $('filePreview').classList.add('hidden');
  $('uploadArea').classList.remove('hidden');
}

$('uploadArea').addEventListener('click', () => $('fileInput').click());
$('uploadArea').addEventListener('dragover', e => { e.preventDefault(); $('uploadArea').classList.add('drag-over'); });
$('uploadArea').addEventListener('dragleave', e => { e.preventDefault(); $('uploadArea').classList.remove('drag-over'); });
$('uploadArea').addEventListener('drop', e => {
  e.preventDefault(); $('uploadArea').classList.remove('drag-over');
  if (e.dataTransfer.files.length > 0) showFile(e.dataTransfer.files[0]);
});
$('fileInput').addEventListener('change', e => { if (e.target.files.length > 0) showFile(e.target.files[0]); });
$('removeFile').addEventListener('click', removeFile);

document.querySelectorAll('.style-card').forEach(card => card.addEventListener('click', () => {
  document.querySelectorAll('.style-card').forEach(c => c.classList.remove('selected'));
  card.classList.add('selected');
  selectedStyle = card.dataset.style;
}));

$('translateBtn').addEventListener('click', async () => {
  if (!uploadedFile) { alert('Please upload a file first'); return; }
  const form = new FormData();
  form.append('file', uploadedFile);
  form.append('source_language', $('sourceLang').value);
  form.append('target_language', $('targetLang').value);
  form.append('style', selectedStyle);
  form.append('output_format', document.querySelector('input[name="format"]:checked').value);
  form.append('context', $('context').value);
  form.append('literal', $('literalTranslation').checked);
  form.append('with_explanations', $('withExplanations').checked);
  form.append('deep_analysis', $('deepAnalysis').checked);
  form.append('with_examples', $('withExamples').checked);

  $('loadingSection').classList.remove('hidden');
  $('resultsSection').classList.add('hidden');
  $('translateBtn').disabled = true;
  try {
    const r = await fetch('/api/v1/translate', { method: 'POST', body: form });
    const d = await r.json();
    if (!r.ok) throw new Error(d.detail || JSON.stringify(d));
    $('translatedText').textContent = d.translation;
    $('resultsSection').classList.remove('hidden');
    $('resultsSection').scrollIntoView({ behavior: 'smooth' });
  } catch (e) {
    alert('Translation error: ' + e.message);
  } finally {
    $('loadingSection').classList.add('hidden');
    $('translateBtn').disabled = false;
  }
});

$('copyBtn').addEventListener('click', () => {
  navigator.clipboard.writeText($('translatedText').textContent)
    .then(() => { $('copyBtn').textContent = 'Copied'; setTimeout(() => { $('copyBtn').textContent = 'Copy'; }, 2000); })
    .catch(() => alert('Could not copy to the clipboard'));
});
$('downloadBtn').addEventListener('click', () => {
  const blob = new Blob([$('translatedText').textContent], { type: 'text/plain' });
  const a = document.createElement('a');
  a.href = URL.createObjectURL(blob);
  a.download = 'translation_' + Date.now() + '.txt';
  document.body.appendChild(a); a.click(); document.body.removeChild(a);
  URL.revokeObjectURL(a.href);
});
$('newTranslationBtn').addEventListener('click', () => {
  removeFile();
  $('resultsSection').classList.add('hidden');
  window.scrollTo({ top: 0, behavior: 'smooth' });
});
</script>
</body></html>"""


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index():
    return INDEX_HTML
